"""Metadata extractors for mdblog.

Title and summary are pulled out of rendered HTML with a flat substring
scan, not an HTML parser. The scan does not understand nesting: a
malformed or nested tag can yield a span that includes unrelated markup,
and a ``<p>`` inside a heading counts as the first paragraph.

Key names:
- extract_title: First h1..h4 inner text, or "Untitled".
- extract_summary: First paragraph inner HTML, or "No summary".
- TitleExtractor, SummaryExtractor, CompositeMetadataExtractor: the same
  scans behind the MetadataExtractor protocol.
"""

from __future__ import annotations

import html

from .content import PageMetadata

DEFAULT_TITLE = "Untitled"
DEFAULT_SUMMARY = "No summary"

# Heading levels scanned for a title, in priority order.
TITLE_LEVELS = (1, 2, 3, 4)


def _find_span(content: str, open_prefix: str, close_tag: str) -> str | None:
    """Return the text between ``open_prefix...>`` and the next ``close_tag``."""
    open_start = content.find(open_prefix)
    if open_start == -1:
        return None
    open_end = content.find(">", open_start)
    if open_end == -1:
        return None
    close_start = content.find(close_tag, open_end + 1)
    if close_start == -1:
        return None
    return content[open_end + 1 : close_start]


def extract_title(content: str) -> str:
    """Return the inner text of the first heading, scanning h1 to h4.

    All of h1 is tried before h2, and so on, so an ``<h2>`` early in the
    page loses to an ``<h1>`` further down. Opening tags may carry
    attributes.

    Args:
        content: Rendered HTML.

    Returns:
        The heading's inner text, or "Untitled" when no h1..h4 is found.

    Examples:
        >>> extract_title('<h2 id="hi">Hi</h2>')
        'Hi'
    """
    content = html.unescape(content)
    for level in TITLE_LEVELS:
        span = _find_span(content, f"<h{level}", f"</h{level}>")
        if span is not None:
            return span
    return DEFAULT_TITLE


def extract_summary(content: str) -> str:
    """Return the inner HTML of the first ``<p>...</p>`` span.

    Args:
        content: Rendered HTML.

    Returns:
        The paragraph's inner markup, verbatim, or "No summary".

    Examples:
        >>> extract_summary("<p>Hello <b>world</b></p>")
        'Hello <b>world</b>'
    """
    content = html.unescape(content)
    open_start = content.find("<p>")
    if open_start == -1:
        return DEFAULT_SUMMARY
    body_start = open_start + len("<p>")
    close_start = content.find("</p>", body_start)
    if close_start == -1:
        return DEFAULT_SUMMARY
    return content[body_start:close_start]


class TitleExtractor:
    """Extracts the page title from rendered HTML."""

    def extract(self, content: str) -> dict[str, str]:
        return {"title": extract_title(content)}


class SummaryExtractor:
    """Extracts the page summary from rendered HTML."""

    def extract(self, content: str) -> dict[str, str]:
        return {"summary": extract_summary(content)}


class CompositeMetadataExtractor:
    """Combines multiple metadata extractors into one PageMetadata.

    Each extractor returns a partial dictionary; results are merged in
    order, later extractors overriding earlier ones.
    """

    def __init__(self, extractors: list | None = None):
        """Initialize with a list of extractors.

        Args:
            extractors: Extractors returning partial metadata dictionaries.
                       If None, uses the title and summary extractors.
        """
        if extractors is None:
            self._extractors = [TitleExtractor(), SummaryExtractor()]
        else:
            self._extractors = list(extractors)

    def add_extractor(self, extractor) -> None:
        """Add an extractor to the composite."""
        self._extractors.append(extractor)

    def extract(self, content: str) -> PageMetadata:
        """Run every extractor and build PageMetadata from the merged result.

        Args:
            content: Rendered HTML.

        Returns:
            PageMetadata, with defaults for any key no extractor produced.
        """
        result: dict[str, str] = {}
        for extractor in self._extractors:
            result.update(extractor.extract(content))
        return PageMetadata(
            title=result.get("title", DEFAULT_TITLE),
            summary=result.get("summary", DEFAULT_SUMMARY),
        )


def extract_metadata(content: str) -> PageMetadata:
    """Extract title and summary from rendered HTML."""
    return default_metadata_extractor.extract(content)


# Default composite extractor instance
default_metadata_extractor = CompositeMetadataExtractor()
