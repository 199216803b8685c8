"""Post assembly for mdblog.

This module turns one rendered document into a Post and turns the ordered
list of posts into the homepage body.

Key names:
- PageMetadata: Title and summary of a rendered page.
- Post: A rendered document ready to be written.
- build_post: Builds a Post from a document and its rendered HTML.
- build_index_body: Concatenates summary blocks for the homepage.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .providers import RemoteDocument

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"

# Placed between consecutive summary blocks on the homepage, never after the last.
SEPARATOR = "<hr />"

READ_MORE_TEXT = "Read more..."


@dataclass(frozen=True)
class PageMetadata:
    """Metadata extracted from a rendered page.

    Attributes:
        title: Inner text of the first h1..h4, or "Untitled".
        summary: Inner HTML of the first paragraph, or "No summary".
    """

    title: str
    summary: str


@dataclass
class Post:
    """A rendered document waiting to be written.

    Attributes:
        rendered_data: Rendered HTML body of the document.
        output_filename: File name of the generated page (``<stem>.html``).
        metadata: Title and summary used on the homepage.
        name: Name of the source document.
    """

    rendered_data: bytes
    output_filename: str
    metadata: PageMetadata
    name: str = ""


def output_stem(name: str) -> str:
    """Return a document name without its ``.md`` suffix.

    Examples:
        >>> output_stem("hello-world.md")
        'hello-world'
    """
    return name.removesuffix(MARKDOWN_SUFFIX)


def build_post(
    document: RemoteDocument,
    rendered_html: bytes,
    filename_stem: str,
    extractor=None,
) -> Post:
    """Build a Post from a rendered document.

    Args:
        document: Listing entry the HTML was rendered from.
        rendered_html: Rendered HTML bytes.
        filename_stem: Output file name without extension.
        extractor: Optional MetadataExtractor; defaults to title and summary scanning.

    Returns:
        Post whose output file is ``<filename_stem>.html``.
    """
    if extractor is None:
        from .extractors import default_metadata_extractor

        extractor = default_metadata_extractor
    metadata = extractor.extract(rendered_html.decode("utf-8", errors="replace"))
    return Post(
        rendered_data=rendered_html,
        output_filename=f"{filename_stem}{HTML_SUFFIX}",
        metadata=metadata,
        name=document.name,
    )


def render_summary_block(post: Post) -> str:
    """Render the homepage block for one post: heading, paragraph, link."""
    return (
        f"<h2>{post.metadata.title}</h2>"
        f"<p>{post.metadata.summary}</p>"
        f'<a href="{post.output_filename}">{READ_MORE_TEXT}</a>'
    )


def build_index_body(posts: Sequence[Post]) -> str:
    """Build the homepage body from posts in listing order.

    Args:
        posts: Posts in the order their documents were listed.

    Returns:
        Summary blocks joined by SEPARATOR; empty string for no posts.
    """
    return SEPARATOR.join(render_summary_block(post) for post in posts)
