"""
Configuration for the Voronoi renderer.

Holds the immutable RenderConfig passed into the renderer and loads it from
the `render` section of a config.yaml file.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple, Union

import yaml

Color = Tuple[int, int, int, int]

NAMED_COLORS: Dict[str, Color] = {
    "aqua": (0, 255, 255, 255),
    "blue": (0, 0, 255, 255),
    "fuchsia": (255, 0, 255, 255),
    "lime": (0, 255, 0, 255),
    "yellow": (255, 255, 0, 255),
    "teal": (0, 128, 128, 255),
    "silver": (192, 192, 192, 255),
    "gray": (128, 128, 128, 255),
    "green": (0, 128, 0, 255),
    "navy": (0, 0, 128, 255),
    "maroon": (128, 0, 0, 255),
    "olive": (128, 128, 0, 255),
    "purple": (128, 0, 128, 255),
    "red": (255, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "black": (0, 0, 0, 255),
}

# Cell fill colors, assigned to seeds round-robin
DEFAULT_PALETTE: Tuple[Color, ...] = tuple(
    NAMED_COLORS[name]
    for name in (
        "aqua",
        "blue",
        "fuchsia",
        "lime",
        "yellow",
        "teal",
        "silver",
        "gray",
        "green",
        "navy",
        "maroon",
        "olive",
        "purple",
        "red",
        "white",
    )
)

DEFAULT_BACKGROUND: Color = (18, 18, 18, 255)
DEFAULT_SEED_COLOR: Color = NAMED_COLORS["black"]


def parse_color(value: Union[str, Sequence[int]]) -> Color:
    """
    Parse a color from config into an RGBA tuple.

    Accepts "#rrggbb", "#rrggbbaa", a named color, or a list of 3 or 4
    channel values in 0..255.

    Raises:
        ValueError: If the value cannot be read as a color
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("#"):
            digits = text[1:]
            if len(digits) not in (6, 8):
                raise ValueError(f"Invalid hex color: {value!r}")
            try:
                channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
            except ValueError:
                raise ValueError(f"Invalid hex color: {value!r}") from None
        elif text in NAMED_COLORS:
            return NAMED_COLORS[text]
        else:
            raise ValueError(f"Unknown color name: {value!r}")
    elif isinstance(value, (list, tuple)):
        channels = list(value)
    else:
        raise ValueError(f"Invalid color: {value!r}")

    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise ValueError(f"Color must have 3 or 4 channels, got {len(channels)}: {value!r}")
    for channel in channels:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise ValueError(f"Color channel out of range 0..255: {value!r}")
    return tuple(channels)  # type: ignore[return-value]


@dataclass(frozen=True)
class RenderConfig:
    """Immutable settings for one Voronoi rendering run."""

    width: int = 800
    height: int = 600
    seed_count: int = 20
    seed_radius: int = 3
    output_path: Path = Path("voronoi.png")
    background_color: Color = DEFAULT_BACKGROUND
    seed_color: Color = DEFAULT_SEED_COLOR
    palette: Tuple[Color, ...] = field(default=DEFAULT_PALETTE)
    random_seed: Optional[int] = None
    # Draw seed centers from [0, width] x [0, height], one past the last pixel
    inclusive_bounds: bool = False

    def __post_init__(self):
        for name in ("width", "height", "seed_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if (
            isinstance(self.seed_radius, bool)
            or not isinstance(self.seed_radius, int)
            or self.seed_radius < 0
        ):
            raise ValueError(f"seed_radius must be a non-negative integer, got {self.seed_radius!r}")
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool)
            or not isinstance(self.random_seed, int)
            or self.random_seed < 0
        ):
            raise ValueError(f"random_seed must be a non-negative integer, got {self.random_seed!r}")
        if not isinstance(self.inclusive_bounds, bool):
            raise ValueError(f"inclusive_bounds must be true or false, got {self.inclusive_bounds!r}")
        if not isinstance(self.output_path, (str, Path)) or not str(self.output_path):
            raise ValueError(f"output_path must be a file path, got {self.output_path!r}")
        if not isinstance(self.palette, (list, tuple)):
            raise ValueError(f"palette must be a list of colors, got {self.palette!r}")

        # Normalize loosely typed values so the instance stays hashable and comparable
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "background_color", parse_color(self.background_color))
        object.__setattr__(self, "seed_color", parse_color(self.seed_color))
        palette = tuple(parse_color(color) for color in self.palette)
        if not palette:
            raise ValueError("palette must contain at least one color")
        object.__setattr__(self, "palette", palette)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "RenderConfig":
        """
        Build a RenderConfig from a mapping such as the `render` config section.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown render config keys: {', '.join(unknown)}")
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "RenderConfig":
        """Return a copy with the non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return RenderConfig.from_dict(values)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load full configuration from config.yaml.

    Args:
        config_path: Path to config.yaml file

    Returns:
        Dictionary with full configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = Path("config.yaml") if config_path is None else Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    return config or {}


def load_render_config(config_path: Optional[Union[str, Path]] = None) -> RenderConfig:
    """
    Load the `render` section of config.yaml as a RenderConfig.

    A file without a `render` section yields the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the section holds unknown keys or invalid values
    """
    config = load_config(config_path)
    section = config.get("render") or {}
    if not isinstance(section, dict):
        raise ValueError(f"render config section must be a mapping, got {type(section).__name__}")
    return RenderConfig.from_dict(section)
