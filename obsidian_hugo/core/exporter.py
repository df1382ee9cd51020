"""Exporter that turns a single vault note into a Hugo post."""

from pathlib import Path
from typing import Iterable, List, Optional

from obsidian_hugo.core.discovery import is_publishable, parse_frontmatter
from obsidian_hugo.core.models import ExportResult, ExportStatus, NoteContext
from obsidian_hugo.core.processor import ContentProcessor
from obsidian_hugo.transforms.frontmatter import FrontmatterTransform, hugo_frontmatter, render_frontmatter
from obsidian_hugo.transforms.links import LinkTransform, to_url


def needs_export(source: Path, dest: Path) -> bool:
    """Check whether the destination is missing or older than the source.

    Equal modification times count as up to date.
    """
    dest = Path(dest)
    if not dest.exists():
        return True
    return Path(source).stat().st_mtime_ns > dest.stat().st_mtime_ns


class Exporter:
    """Exports vault notes to a flat Hugo posts directory.

    Each export is independent: the note is read, checked and either
    skipped or fully rewritten. Any OSError aborts the export and is left
    to the caller.
    """

    def __init__(
        self,
        source_root: Path,
        posts_root: Path,
        asset_source: Path,
        asset_dest: Path,
        frontmatter_transform: Optional[FrontmatterTransform] = None,
        link_transform: Optional[LinkTransform] = None,
        image_transform: Optional[LinkTransform] = None,
    ):
        """Initialize Exporter.

        Args:
            source_root: Obsidian vault root
            posts_root: Hugo directory the posts are written to
            asset_source: Directory holding the vault images
            asset_dest: Hugo directory the images are copied to
            frontmatter_transform: Builds the post frontmatter (default: hugo_frontmatter())
            link_transform: Transform for note links
            image_transform: Transform for image links
        """
        self.source_root = Path(source_root)
        self.posts_root = Path(posts_root)
        self.asset_source = Path(asset_source)
        self.asset_dest = Path(asset_dest)
        self.frontmatter_transform = frontmatter_transform or hugo_frontmatter()
        self.link_transform = link_transform
        self.image_transform = image_transform

    def destination_for(self, relative_path: Path) -> Path:
        """Get the post path for a note path relative to the vault."""
        return self.posts_root / to_url(Path(relative_path).as_posix())

    def export(self, relative_path: Path) -> ExportResult:
        """Export one note if it is publishable and stale.

        Args:
            relative_path: Note path relative to the vault root

        Returns:
            ExportResult describing what happened
        """
        note = NoteContext(path=self.source_root / relative_path, relative_path=Path(relative_path))
        dest = self.destination_for(note.relative_path)

        lines = note.read_lines()
        props, body_start = parse_frontmatter(lines)
        if props is None:
            return ExportResult(note.path, dest, ExportStatus.NO_FRONTMATTER)

        if not is_publishable(props):
            return ExportResult(note.path, dest, ExportStatus.NOT_PUBLISHABLE)

        if not needs_export(note.path, dest):
            return ExportResult(note.path, dest, ExportStatus.UP_TO_DATE)

        print(f"\n export: {note.path} \n    -> {dest}")

        dest_props = self.frontmatter_transform(props, note.path)
        processor = ContentProcessor(
            asset_source=self.asset_source,
            asset_dest=self.asset_dest,
            link_transform=self.link_transform,
            image_transform=self.image_transform,
        )
        with open(dest, 'w', encoding='utf-8') as out:
            out.write(render_frontmatter(dest_props))
            processor.process(lines[body_start:], out)

        return ExportResult(note.path, dest, ExportStatus.EXPORTED, processor.copied_assets)

    def export_path(self, path: Path) -> Optional[ExportResult]:
        """Export a note given by an absolute path.

        Returns:
            ExportResult, or None if the path is not inside the vault
        """
        try:
            relative_path = Path(path).relative_to(self.source_root)
        except ValueError:
            return None
        return self.export(relative_path)

    def export_all(self, notes: Iterable[Path]) -> List[ExportResult]:
        """Export every note yielded by a discovery walk, in order."""
        return [self.export(relative_path) for relative_path in notes]
