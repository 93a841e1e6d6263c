# config.py
import os
from dataclasses import dataclass, replace
from typing import Optional

# Sample count and bounce limit per quality level.
QUALITY_LEVELS = {
    "interactive": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 20},
    "high_quality": {"samples": 200, "bounces": 50},
}

DEFAULT_QUALITY = "balanced"

@dataclass(frozen=True)
class RenderSettings:
    """
    Everything a render run is configured with. Built once at startup and
    never modified while rendering.
    """
    scene: str = "random_scene"
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = QUALITY_LEVELS[DEFAULT_QUALITY]["samples"]
    max_depth: int = QUALITY_LEVELS[DEFAULT_QUALITY]["bounces"]
    workers: Optional[int] = None
    seed: Optional[int] = None
    texture_path: Optional[str] = None
    output: str = "render.png"

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    @classmethod
    def for_quality(cls, quality: str, **overrides) -> "RenderSettings":
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level '{quality}', "
                             f"expected one of: {', '.join(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        return cls(samples_per_pixel=level["samples"], max_depth=level["bounces"], **overrides)

    def with_overrides(self, **changes) -> "RenderSettings":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def validate(self) -> "RenderSettings":
        if self.image_width <= 0:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.texture_path is not None and not os.path.exists(self.texture_path):
            raise FileNotFoundError(f"Texture file not found: {self.texture_path}")
        return self
