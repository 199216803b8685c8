"""Markdown rendering for mdblog.

This module contains the ContentRenderer implementation used for every
document. The extension profile is fixed:

- common block and inline extensions (tables, fenced code, autolinks,
  strikethrough, footnotes, definition lists);
- automatic heading ids;
- blocks may start without a preceding blank line;
- links that leave the site open in a new window.

Raw HTML in the Markdown source is passed through unchanged. The pipeline
treats repository content as trusted input.
"""

from __future__ import annotations

import re

import mistune
from mistune.util import escape as escape_text
from mistune.util import striptags

_PLUGINS = ["strikethrough", "footnotes", "table", "url", "def_list"]


def _generate_heading_id(text: str) -> str:
    """Generate a URL-friendly ID from heading text.

    Args:
        text: The heading text, possibly containing inline markup.

    Returns:
        URL-friendly slug suitable for anchor links.
    """
    slug = striptags(text).lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug.strip("-")


def _is_relative_link(url: str) -> bool:
    """Return True for in-page, root-relative and ``./``/``../`` links."""
    if url.startswith(("#", "./", "../")):
        return True
    return url.startswith("/") and not url.startswith("//")


class _BlogHTMLRenderer(mistune.HTMLRenderer):
    """HTML renderer adding heading ids and new-window links."""

    def __init__(self):
        super().__init__(escape=False)
        self._heading_id_counts: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs) -> str:
        """Render a heading with a unique auto-generated id."""
        base_id = _generate_heading_id(text) or "section"

        if base_id in self._heading_id_counts:
            self._heading_id_counts[base_id] += 1
            heading_id = f"{base_id}-{self._heading_id_counts[base_id]}"
        else:
            self._heading_id_counts[base_id] = 0
            heading_id = base_id

        return f'<h{level} id="{heading_id}">{text}</h{level}>\n'

    def link(self, text: str, url: str, title: str | None = None) -> str:
        """Render a link, opening non-relative targets in a new window."""
        out = f'<a href="{self.safe_url(url)}"'
        if title:
            out += f' title="{escape_text(title)}"'
        if not _is_relative_link(url):
            out += ' target="_blank"'
        return f"{out}>{text}</a>"


class MarkdownRenderer:
    """Renders Markdown bytes to HTML bytes.

    Rendering is deterministic: each call builds a fresh parser, so heading
    id counters never leak between documents.
    """

    def render(self, source: bytes) -> bytes:
        """Render Markdown content to HTML.

        Args:
            source: UTF-8 encoded Markdown. Invalid sequences are replaced.

        Returns:
            UTF-8 encoded HTML.
        """
        text = source.decode("utf-8", errors="replace")
        markdown = mistune.create_markdown(renderer=_BlogHTMLRenderer(), plugins=_PLUGINS)
        return markdown(text).encode("utf-8")
