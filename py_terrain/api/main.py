"""FastAPI main application."""

from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
import numpy as np
import structlog

from .. import __version__
from ..config import settings
from ..log import configure_logging
from ..core.heightfield_generator import HeightFieldGenerator, NoiseParameters, height_to_intensity
from ..core.display import rgb_to_hex
from ..core.world import generate_world, world_height_grid, world_tiles

configure_logging(settings)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Terrain Height Field API",
    description="Fractal simplex-noise terrain height fields",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class NoiseParametersModel(BaseModel):
    """Noise parameters; unset fields fall back to the configured defaults."""

    seed: int = Field(default_factory=lambda: settings.noise_seed, description="Noise seed")
    scale: float = Field(default_factory=lambda: settings.noise_scale, gt=0, description="Initial frequency")
    octaves: int = Field(default_factory=lambda: settings.noise_octaves, ge=1, le=64, description="Octave count")
    persistence: float = Field(default_factory=lambda: settings.noise_persistence, description="Amplitude decay")
    lacunarity: float = Field(default_factory=lambda: settings.noise_lacunarity, description="Frequency growth")
    exponent: float = Field(default_factory=lambda: settings.noise_exponent, description="Shaping power")
    max_height: float = Field(default_factory=lambda: settings.noise_max_height, gt=0, description="Height scale")

    def to_params(self) -> NoiseParameters:
        return NoiseParameters(**self.model_dump())


class HeightFieldRequest(BaseModel):
    """Request for a rectangular window of heights."""

    noise: NoiseParametersModel = Field(default_factory=NoiseParametersModel)
    width: int = Field(..., gt=0, description="Number of columns")
    height: int = Field(..., gt=0, description="Number of rows")
    offset_x: int = Field(0, description="World x of the first column")
    offset_y: int = Field(0, description="World y of the first row")
    include_intensity: bool = Field(False, description="Also return display intensities")


class HeightFieldResponse(BaseModel):
    """Row-major heights for the requested window."""

    width: int
    height: int
    offset_x: int
    offset_y: int
    heights: List[float]
    intensities: Optional[List[float]] = None
    min_height: float
    max_height: float


class TileModel(BaseModel):
    x: int
    y: int
    translation: List[float]
    height: float
    intensity: float
    color: str


class WorldResponse(BaseModel):
    """Default world with its display tiles."""

    width: int
    height: int
    noise: NoiseParametersModel
    tile_size: float
    tiles: List[TileModel]


# Event handlers
@app.on_event("startup")
async def startup_event():
    logger.info("Starting Terrain Height Field API", version=__version__)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Terrain Height Field API")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Terrain Height Field API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/heightfield", response_model=HeightFieldResponse)
def generate_heightfield(request: HeightFieldRequest):
    """Generate the height grid for a window of the world."""
    cells = request.width * request.height
    if cells > settings.max_grid_cells:
        raise HTTPException(
            status_code=413,
            detail=f"Requested {cells} cells, limit is {settings.max_grid_cells}",
        )

    params = request.noise.to_params()
    logger.info(
        "Height field requested",
        width=request.width,
        height=request.height,
        offset_x=request.offset_x,
        offset_y=request.offset_y,
        seed=params.seed,
    )

    try:
        grid = HeightFieldGenerator(params).build_height_grid(
            request.width, request.height, request.offset_x, request.offset_y
        )
    except Exception as e:
        logger.error("Height field generation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Height field generation failed")

    if not np.all(np.isfinite(grid.values)):
        raise HTTPException(
            status_code=422,
            detail="Parameters produce non-finite heights",
        )

    intensities = None
    if request.include_intensity:
        intensities = height_to_intensity(grid.values, params.max_height).tolist()

    return HeightFieldResponse(
        width=grid.width,
        height=grid.height,
        offset_x=grid.offset_x,
        offset_y=grid.offset_y,
        heights=grid.to_list(),
        intensities=intensities,
        min_height=float(np.min(grid.values)),
        max_height=float(np.max(grid.values)),
    )


@app.get("/world", response_model=WorldResponse)
def get_world():
    """Default world from settings with one display tile per cell."""
    world = generate_world(settings)
    if world.width * world.height > settings.max_grid_cells:
        raise HTTPException(status_code=413, detail="Configured world exceeds the grid cell limit")

    grid = world_height_grid(world)
    tiles = world_tiles(world, tile_size=settings.tile_size, grid=grid)

    return WorldResponse(
        width=world.width,
        height=world.height,
        noise=NoiseParametersModel(**asdict(world.noise)),
        tile_size=settings.tile_size,
        tiles=[
            TileModel(
                x=tile.x,
                y=tile.y,
                translation=list(tile.translation),
                height=tile.height,
                intensity=tile.intensity,
                color=rgb_to_hex(*tile.color),
            )
            for tile in tiles
        ],
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
