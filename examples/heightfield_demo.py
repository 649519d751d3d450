#!/usr/bin/env python3
"""
Demo script rendering height fields as greyscale images.
"""

import numpy as np
import matplotlib.pyplot as plt
from py_terrain.core import HeightFieldGenerator, NoiseParameters, height_to_intensity


def main():
    """Compare a few parameter sets side by side."""
    print("Py-Terrain Height Field Demo")
    print("=" * 40)

    width, height = 100, 100
    base = NoiseParameters()

    variants = {
        "default": base,
        "single octave": base.replace(octaves=1),
        "linear shaping": base.replace(exponent=1.0),
        "low frequency": base.replace(scale=0.05),
    }

    plt.figure(figsize=(12, 12))

    for i, (name, params) in enumerate(variants.items(), 1):
        print(f"\nGenerating '{name}' ({width}x{height}, {params.octaves} octaves)...")
        grid = HeightFieldGenerator(params).build_height_grid(width, height)
        heights = grid.as_array()

        flat_pct = np.sum(heights == 0) / heights.size * 100
        print(f"  Flat (clamped) cells: {flat_pct:.1f}%")
        print(f"  Average height: {np.mean(heights):.4f}")
        print(f"  Max height: {np.max(heights):.4f}")

        intensity = np.clip(height_to_intensity(heights, params.max_height), 0.0, 1.0)

        plt.subplot(2, 2, i)
        plt.imshow(intensity, cmap='gray', vmin=0, vmax=1, origin='lower')
        plt.colorbar(label='Intensity')
        plt.title(f'{name} ({flat_pct:.1f}% flat)')
        plt.xlabel('X')
        plt.ylabel('Y')

    plt.tight_layout()
    plt.savefig('heightfield_examples.png', dpi=150)
    print("\nSaved visualization to heightfield_examples.png")


if __name__ == "__main__":
    main()
