"""Icon Pack - Styled raster icon pack export from remote SVG collections."""

__version__ = "0.1.0"

from .cache import FileStore, MemoryStore, ResourceCache
from .compositor import Compositor, DrawingSurface
from .errors import (
    EncodingError,
    IconExportError,
    IconPackError,
    InvalidIconIdError,
    NetworkFetchError,
    RasterLoadError,
    StyleConfigError,
)
from .export import (
    ExportResult,
    PackManifest,
    build_manifest,
    export_icon_pack,
    generate_pack_json,
    save_to_directory,
)
from .identifiers import join_icon_id, normalize_icon_name, split_icon_id
from .libraries import LIBRARIES, IconLibrary, get_library
from .normalize import normalize_svg
from .provider import IconifyProvider, IconSource
from .style import StyleConfig, parse_style_file

__all__ = [
    # Cache
    "FileStore",
    "MemoryStore",
    "ResourceCache",
    # Compositor
    "Compositor",
    "DrawingSurface",
    # Errors
    "EncodingError",
    "IconExportError",
    "IconPackError",
    "InvalidIconIdError",
    "NetworkFetchError",
    "RasterLoadError",
    "StyleConfigError",
    # Export
    "ExportResult",
    "PackManifest",
    "build_manifest",
    "export_icon_pack",
    "generate_pack_json",
    "save_to_directory",
    # Identifiers
    "join_icon_id",
    "normalize_icon_name",
    "split_icon_id",
    # Libraries
    "LIBRARIES",
    "IconLibrary",
    "get_library",
    # Normalizer
    "normalize_svg",
    # Provider
    "IconifyProvider",
    "IconSource",
    # Style
    "StyleConfig",
    "parse_style_file",
]
