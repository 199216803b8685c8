"""Tests for MarkdownRenderer."""

from mdblog.protocols import ContentRenderer
from mdblog.renderers import MarkdownRenderer, _generate_heading_id, _is_relative_link


def render(text: str) -> str:
    return MarkdownRenderer().render(text.encode("utf-8")).decode("utf-8")


def test_renderer_satisfies_protocol():
    assert isinstance(MarkdownRenderer(), ContentRenderer)


def test_renderer_public_surface_is_render_only():
    public = {name for name in dir(MarkdownRenderer) if not name.startswith("_")}
    assert public == {"render"}


def test_render_returns_bytes():
    html = MarkdownRenderer().render(b"Hello")
    assert isinstance(html, bytes)
    assert html.strip() == b"<p>Hello</p>"


def test_render_is_deterministic():
    source = b"# Title\n\n## Title\n\nSome *text* with [a link](https://example.com).\n"
    renderer = MarkdownRenderer()
    assert renderer.render(source) == renderer.render(source)
    assert renderer.render(source) == MarkdownRenderer().render(source)


def test_headings_get_unique_ids():
    html = render("# Getting Started\n\n## Getting Started\n\n### Why `mdblog`?\n")
    assert '<h1 id="getting-started">Getting Started</h1>' in html
    assert '<h2 id="getting-started-1">Getting Started</h2>' in html
    assert '<h3 id="why-mdblog">Why <code>mdblog</code>?</h3>' in html


def test_heading_ids_reset_between_documents():
    renderer = MarkdownRenderer()
    renderer.render(b"# Intro\n")
    assert b'<h1 id="intro">' in renderer.render(b"# Intro\n")


def test_external_links_open_in_new_window():
    html = render("[site](https://example.com)")
    assert '<a href="https://example.com" target="_blank">site</a>' in html


def test_relative_links_stay_in_window():
    html = render("[top](#intro) [about](/about.html) [up](../x.html)")
    assert "target" not in html


def test_link_title_is_kept():
    html = render('[site](https://example.com "Example")')
    assert 'title="Example"' in html
    assert 'target="_blank"' in html


def test_bare_urls_are_autolinked():
    html = render("Visit https://example.com today")
    assert '<a href="https://example.com" target="_blank">https://example.com</a>' in html


def test_common_extensions():
    html = render(
        "| a | b |\n|---|---|\n| 1 | 2 |\n\n"
        "~~gone~~\n\n"
        "```python\nprint('hi')\n```\n"
    )
    assert "<table>" in html
    assert "<del>gone</del>" in html
    assert '<code class="language-python">' in html


def test_block_without_preceding_blank_line():
    html = render("Intro line\n# Heading\n- item\n")
    assert '<h1 id="heading">Heading</h1>' in html
    assert "<li>item</li>" in html


def test_raw_html_passes_through():
    html = render('<div class="hero"><span>HTML stays</span></div>\n')
    assert '<div class="hero"><span>HTML stays</span></div>' in html


def test_invalid_utf8_is_replaced():
    html = MarkdownRenderer().render(b"caf\xe9")
    assert "caf�".encode("utf-8") in html


def test_generate_heading_id():
    assert _generate_heading_id("Hello, World!") == "hello-world"
    assert _generate_heading_id("<em>Big</em> News") == "big-news"


def test_is_relative_link():
    assert _is_relative_link("#top")
    assert _is_relative_link("/about")
    assert _is_relative_link("./a.html")
    assert not _is_relative_link("//cdn.example.com/x.js")
    assert not _is_relative_link("https://example.com")
    assert not _is_relative_link("post.html")
