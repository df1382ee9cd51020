"""Frontmatter transform factories for Obsidian Hugo.

These factories create transform functions that turn the front matter of
a source note into the front matter written for Hugo.
"""

import datetime
from pathlib import Path
from typing import Callable, List

from obsidian_hugo.core.models import ListValue, PropertyMap, Scalar

FrontmatterTransform = Callable[[PropertyMap, Path], PropertyMap]


def format_timestamp(mtime: float) -> str:
    """Format a modification time as an ISO-8601 string with a UTC offset."""
    return datetime.datetime.fromtimestamp(mtime, tz=datetime.timezone.utc).isoformat()


def hugo_frontmatter() -> FrontmatterTransform:
    """Create a transform that produces the Hugo post frontmatter.

    Output includes: title (file name without extension, verbatim),
    date (source modification time) and tags when the source has them.
    Nothing else from the source frontmatter is carried over.

    Returns:
        A transform function (source_props, source_path) -> PropertyMap
    """
    def transform(props: PropertyMap, source_path: Path) -> PropertyMap:
        source_path = Path(source_path)
        result: PropertyMap = {
            'title': Scalar(source_path.stem),
            'date': Scalar(format_timestamp(source_path.stat().st_mtime)),
        }
        if 'tags' in props:
            result['tags'] = props['tags']
        return result
    return transform


def render_frontmatter(props: PropertyMap) -> str:
    """Render a property map as a frontmatter block.

    Keys are written in sorted order so output is reproducible. Lists are
    written as a "key:" line followed by one " - item" line per item.

    Args:
        props: Properties to render

    Returns:
        The block including both "---" delimiters and a trailing newline
    """
    lines: List[str] = ['---']
    for key in sorted(props):
        value = props[key]
        if isinstance(value, ListValue):
            lines.append(f"{key}:")
            lines.extend(f" - {item}" for item in value.items)
        else:
            lines.append(f"{key}: {value.value}")
    lines.append('---')
    return '\n'.join(lines) + '\n'
