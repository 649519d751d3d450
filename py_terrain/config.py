from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (console or json)")

    # Noise Configuration
    noise_seed: int = Field(default=259, description="Seed of the simplex noise field")
    noise_scale: float = Field(default=1.0, description="Initial spatial frequency")
    noise_octaves: int = Field(default=8, description="Number of summed octaves")
    noise_persistence: float = Field(default=0.75, description="Amplitude decay per octave")
    noise_lacunarity: float = Field(default=1.75, description="Frequency growth per octave")
    noise_exponent: float = Field(default=4.0, description="Shaping power applied to the sum")
    noise_max_height: float = Field(default=1.0, description="Final height scale factor")

    # World Configuration
    world_width: int = Field(default=100, description="Default world width in cells")
    world_height: int = Field(default=100, description="Default world height in cells")
    tile_size: float = Field(default=3.0, description="Edge length of one displayed tile")

    # Performance Configuration
    max_grid_cells: int = Field(default=1_000_000, description="Max cells per generated grid")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
