"""Style configuration applied uniformly to every icon of an export."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Literal

import yaml
from PIL import ImageColor

from .errors import StyleConfigError

BackgroundShape = Literal["circle", "rounded", "square"]
Effect = Literal["shadow", "glow", "none"]

BACKGROUND_SHAPES: tuple[BackgroundShape, ...] = ("circle", "rounded", "square")
EFFECTS: tuple[Effect, ...] = ("shadow", "glow", "none")

DEFAULT_ICON_SIZE = 144

# YAML keys as written by the web front end
_CAMEL_CASE_KEYS = {
    "strokeWidth": "stroke_width",
    "foregroundColor": "foreground_color",
    "backgroundColor": "background_color",
    "backgroundShape": "background_shape",
    "iconSize": "icon_size",
}


@dataclass(frozen=True)
class StyleConfig:
    """Visual parameters for an export run.

    Attributes:
        stroke_width: Stroke width applied to stroke-drawn icons.
        foreground_color: Icon color (hex or CSS color name).
        background_color: Background shape color.
        background_shape: Shape of the background.
        padding: Margin on each side as a percentage of the output size.
        effect: Effect drawn under the icon.
        icon_size: Output width and height in pixels.
    """

    stroke_width: float = 2
    foreground_color: str = "#ffffff"
    background_color: str = "#7c3aed"
    background_shape: BackgroundShape = "rounded"
    padding: float = 20
    effect: Effect = "shadow"
    icon_size: int = DEFAULT_ICON_SIZE

    def __post_init__(self) -> None:
        for name in ("stroke_width", "padding"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise StyleConfigError(f"{name} must be numeric, got {value!r}")
        if self.stroke_width <= 0:
            raise StyleConfigError(f"stroke_width must be positive, got {self.stroke_width}")
        if not 0 <= self.padding < 100:
            raise StyleConfigError(f"padding must be in [0, 100), got {self.padding}")
        if isinstance(self.icon_size, bool) or not isinstance(self.icon_size, int) or self.icon_size <= 0:
            raise StyleConfigError(f"icon_size must be a positive integer, got {self.icon_size!r}")
        if self.background_shape not in BACKGROUND_SHAPES:
            raise StyleConfigError(
                f"background_shape must be one of {', '.join(BACKGROUND_SHAPES)}, got '{self.background_shape}'"
            )
        if self.effect not in EFFECTS:
            raise StyleConfigError(f"effect must be one of {', '.join(EFFECTS)}, got '{self.effect}'")
        for name in ("foreground_color", "background_color"):
            value = getattr(self, name)
            try:
                ImageColor.getrgb(value)
            except (ValueError, AttributeError) as e:
                raise StyleConfigError(f"{name} is not a valid color: {value!r}") from e

    def with_overrides(self, **changes: Any) -> "StyleConfig":
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def parse_style_data(data: dict) -> StyleConfig:
    """Build a StyleConfig from a dictionary.

    Accepts snake_case keys as well as the camelCase keys used by the
    web front end. Missing keys take their defaults.

    Args:
        data: Style dictionary.

    Returns:
        Parsed StyleConfig.

    Raises:
        StyleConfigError: If a key is unknown or a value is invalid.
    """
    known = {f.name for f in fields(StyleConfig)}
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = _CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            raise StyleConfigError(f"Unknown style key '{key}'")
        values[name] = value

    try:
        if "stroke_width" in values:
            values["stroke_width"] = float(values["stroke_width"])
        if "padding" in values:
            values["padding"] = float(values["padding"])
        if "icon_size" in values:
            values["icon_size"] = int(values["icon_size"])
    except (TypeError, ValueError) as e:
        raise StyleConfigError(f"Invalid numeric style value: {e}") from e

    for name in ("foreground_color", "background_color", "background_shape", "effect"):
        if name in values:
            values[name] = str(values[name])

    return StyleConfig(**values)


def parse_style_file(style_path: Path) -> StyleConfig:
    """Parse a YAML style file.

    The file may hold the style at top level or under a ``style`` key.

    Args:
        style_path: Path to the YAML file.

    Returns:
        Parsed StyleConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        StyleConfigError: If the style is invalid.
    """
    with open(style_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return StyleConfig()
    if not isinstance(data, dict):
        raise StyleConfigError("Style file must be a YAML dictionary")
    if "style" in data:
        data = data["style"]
        if not isinstance(data, dict):
            raise StyleConfigError("'style' section must be a dictionary")

    return parse_style_data(data)
