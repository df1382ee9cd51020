"""Content processor for rewriting Obsidian note bodies."""

import shutil
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from obsidian_hugo.transforms.links import LinkTransform, asset_link, post_link, to_url

END_MARKER = '=== end ==='
FENCE = '```'
IMAGE_EXTENSIONS = ('.png', '.jpg')


class ContentProcessor:
    """Rewrites the body of a note for Hugo.

    Handles:
    - Wikilink to post link conversion
    - Image reference conversion, copying the image to the assets root
    - Fenced code blocks, which are passed through untouched
    - Truncation at the "=== end ===" marker
    """

    def __init__(
        self,
        asset_source: Path,
        asset_dest: Path,
        link_transform: Optional[LinkTransform] = None,
        image_transform: Optional[LinkTransform] = None,
    ):
        """Initialize ContentProcessor.

        Args:
            asset_source: Directory images are copied from
            asset_dest: Directory images are copied to
            link_transform: Transform for note links (default: /posts/<slug>/)
            image_transform: Transform for image links (default: /assets/<slug>)
        """
        self.asset_source = Path(asset_source)
        self.asset_dest = Path(asset_dest)
        self.link_transform = link_transform or post_link()
        self.image_transform = image_transform or asset_link()
        self.copied_assets: List[Path] = []

    def process(self, lines: Iterable[str], out: TextIO) -> None:
        """Rewrite body lines into out.

        Args:
            lines: Body lines without line terminators
            out: Text stream the rewritten lines are written to
        """
        in_fence = False
        for line in lines:
            stripped = line.strip()
            if stripped == END_MARKER:
                break

            if not in_fence and stripped.startswith(FENCE):
                in_fence = True
                out.write(line + '\n')
                continue

            if in_fence:
                out.write(line + '\n')
                if stripped == FENCE:
                    in_fence = False
                continue

            out.write(self.rewrite_line(line) + '\n')

    def rewrite_line(self, line: str) -> str:
        """Rewrite every [[...]] reference in a line of prose.

        Args:
            line: A line outside any code fence

        Returns:
            The rewritten line without a terminator
        """
        parts: List[str] = []
        curr = 0
        while True:
            start = line.find('[[', curr)
            if start == -1:
                break
            parts.append(line[curr:start])
            end = line.find(']]', start + 2)
            if end == -1:
                curr = start
                break
            parts.append(self._rewrite_reference(line[start + 2:end]))
            curr = end + 2

        parts.append(line[curr:])
        return ''.join(parts)

    def _rewrite_reference(self, inner: str) -> str:
        if inner.endswith(IMAGE_EXTENSIONS):
            slug = to_url(inner)
            self._copy_asset(inner, slug)
            return self.image_transform(inner, slug)

        if inner.strip():
            return self.link_transform(inner, to_url(inner))

        return f"[[{inner}]]"

    def _copy_asset(self, name: str, slug: str) -> None:
        src = self.asset_source / name
        dst = self.asset_dest / slug
        print(f"    copy: {src}\n      -> {dst}")
        shutil.copyfile(src, dst)
        self.copied_assets.append(dst)
