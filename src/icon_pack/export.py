"""Batch export of icon packs.

Icons are processed strictly in selection order, one at a time:
fetch -> normalize -> rasterize -> record. The first failing icon aborts
the export and no archive is produced.
"""

import io
import json
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .compositor import Compositor
from .errors import IconExportError, IconPackError
from .identifiers import icon_file_name, normalize_icon_name, split_icon_id
from .libraries import get_convention
from .provider import IconSource
from .style import StyleConfig

log = logging.getLogger(__name__)

DEFAULT_PACK_NAME = "My Icon Pack"
DEFAULT_ARCHIVE_STEM = "icon-pack"
PACK_VERSION = "1.0.0"
PACK_AUTHOR = "User"
MANIFEST_FILE = "pack.json"

ProgressCallback = Callable[[int, int], None]
Delivery = Callable[[bytes, str], None]


@dataclass(frozen=True)
class ManifestEntry:
    """One icon listed in the manifest."""

    name: str
    file: str


@dataclass
class PackManifest:
    """Metadata document describing a pack."""

    name: str
    description: str
    version: str = PACK_VERSION
    author: str = PACK_AUTHOR
    icons: list[ManifestEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "version": self.version,
            "author": self.author,
            "description": self.description,
            "icons": [{"name": e.name, "file": e.file} for e in self.icons],
        }

    def to_json(self) -> str:
        """Pretty-printed JSON text."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class RenderedIcon:
    """Rasterized icon awaiting archiving."""

    icon_id: str
    file_name: str
    data: bytes


@dataclass
class ExportResult:
    """Outcome of a successful export."""

    archive: bytes
    file_name: str
    manifest: PackManifest
    icons: list[RenderedIcon] = field(default_factory=list)


def build_manifest(pack_name: str, icon_ids: list[str]) -> PackManifest:
    """Build the manifest for a selection.

    Args:
        pack_name: Pack name; empty falls back to "My Icon Pack".
        icon_ids: Selected icon identifiers in selection order.

    Returns:
        Manifest with one entry per selected icon, duplicates included.

    Raises:
        InvalidIconIdError: If an identifier is malformed.
    """
    entries = []
    for icon_id in icon_ids:
        _, name = split_icon_id(icon_id)
        entries.append(ManifestEntry(name=normalize_icon_name(name), file=icon_file_name(icon_id)))

    return PackManifest(
        name=pack_name or DEFAULT_PACK_NAME,
        description=f"Generated icon pack with {len(icon_ids)} icons",
        icons=entries,
    )


def generate_pack_json(pack_name: str, icon_ids: list[str]) -> str:
    """Manifest preview as pretty-printed JSON, without rendering."""
    return build_manifest(pack_name, icon_ids).to_json()


def archive_file_name(pack_name: str) -> str:
    """File name suggested to the delivery collaborator."""
    return f"{pack_name or DEFAULT_ARCHIVE_STEM}.zip"


def build_archive(icons: list[RenderedIcon], manifest_json: str) -> bytes:
    """Package rendered icons and the manifest into a zip archive.

    Icons sharing a file name overwrite each other; the last one wins.
    """
    files: dict[str, bytes] = {}
    for icon in icons:
        files[icon.file_name] = icon.data

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for file_name, data in files.items():
            zf.writestr(file_name, data)
        zf.writestr(MANIFEST_FILE, manifest_json)
    return buffer.getvalue()


def save_to_directory(directory: Path) -> Delivery:
    """Delivery collaborator that writes the archive into a directory."""

    def deliver(archive: bytes, file_name: str) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / file_name).write_bytes(archive)
        log.info("Saved %s", directory / file_name)

    return deliver


def render_icon(
    icon_id: str,
    style: StyleConfig,
    source: IconSource,
    compositor: Compositor,
) -> RenderedIcon:
    """Fetch and render a single icon.

    Raises:
        IconPackError: If any stage of the pipeline fails.
    """
    collection, name = split_icon_id(icon_id)
    convention = get_convention(collection)
    svg = source.get_icon_svg(collection, name)
    data = compositor.render(svg, style, icon_id, convention=convention, size=style.icon_size)
    return RenderedIcon(icon_id=icon_id, file_name=icon_file_name(icon_id), data=data)


def export_icon_pack(
    pack_name: str,
    icon_ids: list[str],
    style: StyleConfig,
    source: IconSource,
    deliver: Delivery | None = None,
    on_progress: ProgressCallback | None = None,
    compositor: Compositor | None = None,
) -> ExportResult:
    """Export a selection of icons as a zip archive.

    Args:
        pack_name: Pack name used in the manifest and the archive name.
        icon_ids: Icon identifiers in selection order.
        style: Style applied to every icon.
        source: Cached icon source.
        deliver: Receives the archive bytes and suggested file name.
        on_progress: Called as ``(current, total)`` before each icon,
            with ``current`` counting from 1.
        compositor: Compositor to reuse; a default one is created when
            omitted.

    Returns:
        ExportResult with the archive and manifest.

    Raises:
        IconExportError: On the first icon that fails; nothing is
            delivered in that case.
    """
    if compositor is None:
        compositor = Compositor()

    total = len(icon_ids)
    rendered: list[RenderedIcon] = []
    for index, icon_id in enumerate(icon_ids, start=1):
        if on_progress is not None:
            on_progress(index, total)
        log.info("Exporting icon %d/%d: %s", index, total, icon_id)

        try:
            rendered.append(render_icon(icon_id, style, source, compositor))
        except IconPackError as e:
            log.error("Failed to export icon %s: %s", icon_id, e)
            raise IconExportError(icon_id) from e

    manifest = build_manifest(pack_name, icon_ids)
    archive = build_archive(rendered, manifest.to_json())
    file_name = archive_file_name(pack_name)

    if deliver is not None:
        deliver(archive, file_name)

    return ExportResult(archive=archive, file_name=file_name, manifest=manifest, icons=rendered)
