"""Link transform factories for Obsidian Hugo.

These factories create the functions that render rewritten wikilinks
and image references as Markdown links for the Hugo site.
"""

import os
from typing import Callable

LinkTransform = Callable[[str, str], str]


def to_url(text: str) -> str:
    """Convert a relative path or note title to a URL slug.

    Spaces and path separators become hyphens, then the result is lowercased.

    Args:
        text: A relative path or a wikilink target

    Returns:
        The slug, e.g. "Notes/My Note.md" -> "notes-my-note.md"
    """
    slug = text.replace(' ', '-').replace('/', '-')
    if os.sep != '/':
        slug = slug.replace(os.sep, '-')
    return slug.lower()


def post_link(prefix: str = "/posts") -> LinkTransform:
    """Create a transform that links to another exported post.

    Args:
        prefix: URL prefix of the posts section

    Returns:
        A transform function (text, slug) -> markdown link
    """
    prefix = prefix.rstrip('/')

    def transform(text: str, slug: str) -> str:
        return f"[{text}]({prefix}/{slug}/)"
    return transform


def asset_link(prefix: str = "/assets") -> LinkTransform:
    """Create a transform that links to a copied asset.

    The display text is ignored, assets are shown by their slug.

    Args:
        prefix: URL prefix of the assets directory

    Returns:
        A transform function (text, slug) -> markdown link
    """
    prefix = prefix.rstrip('/')

    def transform(text: str, slug: str) -> str:
        return f"[{slug}]({prefix}/{slug})"
    return transform
