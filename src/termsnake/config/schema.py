"""Configuration schema using Pydantic"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class BoardConfig(BaseModel):
    """Playing field size"""

    width: int = Field(
        default=30,
        ge=5,
        le=200,
        description="Grid width in cells",
    )
    height: int = Field(
        default=20,
        ge=5,
        le=100,
        description="Grid height in cells",
    )


class SpeedConfig(BaseModel):
    """Tick pacing (all values in seconds)"""

    base_interval: float = Field(
        default=0.150,
        gt=0.0,
        description="Time between ticks at score 0",
    )
    speed_step: float = Field(
        default=0.005,
        ge=0.0,
        description="Interval reduction per point scored",
    )
    min_interval: float = Field(
        default=0.060,
        gt=0.0,
        description="Fastest allowed tick interval",
    )
    poll_interval: float = Field(
        default=0.020,
        gt=0.0,
        le=1.0,
        description="How long to wait for a key press per loop iteration",
    )
    game_over_pause: float = Field(
        default=2.0,
        ge=0.0,
        description="How long the final frame stays on screen",
    )

    @model_validator(mode="after")
    def check_floor(self) -> "SpeedConfig":
        if self.min_interval > self.base_interval:
            raise ValueError(
                f"min_interval ({self.min_interval}) must not exceed base_interval ({self.base_interval})"
            )
        return self


class StorageConfig(BaseModel):
    """High-score storage"""

    data_path: str = Field(
        default=".data/data.json",
        description="Ledger file, relative paths resolve against the working directory",
    )


class DisplayConfig(BaseModel):
    """Colors and screen layout (rich color names)"""

    snake_color: str = Field(default="green", description="Body segment color")
    head_color: str = Field(default="bright_green", description="Head segment color")
    food_color: str = Field(default="red", description="Food color")
    border_color: str = Field(default="grey50", description="Border color")
    show_scores: bool = Field(
        default=True,
        description="Show the high-score table next to the board",
    )


class Config(BaseModel):
    """Main application configuration"""

    board: BoardConfig = Field(
        default_factory=BoardConfig,
        description="Board configuration",
    )
    speed: SpeedConfig = Field(
        default_factory=SpeedConfig,
        description="Speed configuration",
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Storage configuration",
    )
    display: DisplayConfig = Field(
        default_factory=DisplayConfig,
        description="Display configuration",
    )

    class Config:
        """Pydantic config"""

        extra = "ignore"  # Ignore unknown fields
