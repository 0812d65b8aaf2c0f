"""Registry of supported icon libraries and curated icon sets."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping

# How a collection draws its icons
DrawingConvention = Literal["stroke", "fill", "mixed"]
CONVENTIONS: tuple[DrawingConvention, ...] = ("stroke", "fill", "mixed")


@dataclass(frozen=True)
class IconLibrary:
    """Descriptor of a remote icon collection."""

    id: str
    name: str
    description: str
    icon_count: str
    prefix: str
    convention: DrawingConvention
    supports_current_color: bool = True

    @property
    def supports_stroke(self) -> bool:
        """Whether stroke width is meaningful for this collection."""
        return self.convention == "stroke"


@dataclass(frozen=True)
class CuratedIcon:
    """Hand-picked icon with a display label."""

    id: str
    label: str
    category: str


_LIBRARIES = (
    IconLibrary("lucide", "Lucide", "Beautiful & consistent icons", "1,400+", "lucide", "stroke"),
    IconLibrary(
        "material-symbols",
        "Material Symbols",
        "Google's Material Design icons",
        "2,500+",
        "material-symbols",
        "fill",
    ),
    IconLibrary("heroicons", "Heroicons", "Tailwind Labs icon set", "300+", "heroicons", "stroke"),
    IconLibrary("tabler", "Tabler Icons", "Over 4,900 pixel-perfect icons", "4,900+", "tabler", "stroke"),
    IconLibrary("phosphor", "Phosphor", "Flexible icon family", "6,000+", "ph", "mixed"),
    IconLibrary("carbon", "Carbon", "IBM's design system icons", "2,000+", "carbon", "fill"),
    IconLibrary("iconoir", "Iconoir", "Simple and definitive", "1,500+", "iconoir", "stroke"),
    IconLibrary("solar", "Solar", "Bold, broken, line, outline styles", "7,000+", "solar", "mixed"),
    IconLibrary("mingcute", "MingCute", "Carefully crafted icons", "2,800+", "mingcute", "fill"),
    IconLibrary("fluent", "Fluent", "Microsoft Fluent design", "12,000+", "fluent", "fill"),
    IconLibrary("mdi", "Material Design Icons", "Community-maintained Material icons", "7,000+", "mdi", "fill"),
    IconLibrary(
        "simple-icons",
        "Simple Icons",
        "Brand icons for popular services",
        "3,000+",
        "simple-icons",
        "fill",
    ),
)

LIBRARIES: Mapping[str, IconLibrary] = MappingProxyType({lib.id: lib for lib in _LIBRARIES})
_BY_PREFIX: Mapping[str, IconLibrary] = MappingProxyType({lib.prefix: lib for lib in _LIBRARIES})

DEFAULT_LIBRARY = "lucide"


def get_library(key: str) -> IconLibrary | None:
    """Look up a library by id, falling back to its request prefix.

    Args:
        key: Library id (``"phosphor"``) or prefix (``"ph"``).

    Returns:
        The library, or None if nothing is registered under that key.
    """
    return LIBRARIES.get(key) or _BY_PREFIX.get(key)


def get_convention(collection: str) -> DrawingConvention | None:
    """Drawing convention for a collection prefix, None if unknown."""
    library = get_library(collection)
    return library.convention if library else None


def _curated(category: str, *items: tuple[str, str]) -> tuple[CuratedIcon, ...]:
    return tuple(CuratedIcon(id=f"lucide:{name}", label=label, category=category) for name, label in items)


SYSTEM_APPS = _curated(
    "System",
    ("globe", "Browser"),
    ("folder", "Folder"),
    ("file", "File"),
    ("settings", "Settings"),
    ("terminal", "Terminal"),
    ("code", "Code Editor"),
    ("music", "Music"),
    ("video", "Video"),
    ("image", "Image"),
    ("mail", "Mail"),
    ("calendar", "Calendar"),
    ("clock", "Clock"),
    ("calculator", "Calculator"),
    ("trash", "Trash"),
    ("download", "Download"),
    ("upload", "Upload"),
    ("search", "Search"),
    ("home", "Home"),
    ("monitor", "Monitor"),
    ("laptop", "Laptop"),
)

STREAMING_APPS = _curated(
    "Streaming",
    ("radio", "Radio"),
    ("mic", "Microphone"),
    ("video", "Video Camera"),
    ("camera", "Camera"),
    ("play", "Play"),
    ("pause", "Pause"),
    ("stop", "Stop"),
    ("skip-forward", "Skip Forward"),
    ("skip-back", "Skip Back"),
    ("volume-2", "Volume"),
    ("volume-x", "Mute"),
    ("headphones", "Headphones"),
    ("speaker", "Speaker"),
    ("circle", "Live"),
    ("users", "Viewers"),
    ("heart", "Like"),
    ("message-circle", "Chat"),
    ("share", "Share"),
    ("film", "Film"),
    ("tv", "TV"),
)

ACTION_ICONS = _curated(
    "Actions",
    ("power", "Power"),
    ("refresh-cw", "Refresh"),
    ("rotate-cw", "Rotate"),
    ("zoom-in", "Zoom In"),
    ("zoom-out", "Zoom Out"),
    ("maximize", "Maximize"),
    ("minimize", "Minimize"),
    ("x", "Close"),
    ("check", "Check"),
    ("plus", "Add"),
    ("minus", "Remove"),
    ("edit", "Edit"),
    ("save", "Save"),
    ("copy", "Copy"),
    ("cut", "Cut"),
    ("clipboard", "Paste"),
    ("undo", "Undo"),
    ("redo", "Redo"),
    ("lock", "Lock"),
    ("unlock", "Unlock"),
)

ALL_CURATED_ICONS = SYSTEM_APPS + STREAMING_APPS + ACTION_ICONS


def curated_icons_by_category() -> dict[str, list[CuratedIcon]]:
    """Group the curated icons by category, keeping declaration order."""
    grouped: dict[str, list[CuratedIcon]] = {}
    for icon in ALL_CURATED_ICONS:
        grouped.setdefault(icon.category, []).append(icon)
    return grouped
