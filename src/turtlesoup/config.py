"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel

DEFAULT_CONFIG_PATH = "configs/turtlesoup.json"


class CanvasConfig(BaseModel):
    width: int = 500
    height: int = 500
    scale: float = 1.0
    stroke_width: float = 2
    background: str = "#f0f0f0"
    title: str = "Turtle Graphics Output"
    fit: bool = False
    margin: float = 20.0


class PenConfig(BaseModel):
    up_angle: int = 90
    down_angle: int = 40
    travel_speed: int = 1000
    draw_speed: int = 500


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    pen: PenConfig = PenConfig()

    @classmethod
    def load(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = DEFAULT_CONFIG_PATH):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
