"""Tests for post assembly and the homepage body."""

from mdblog.content import (
    SEPARATOR,
    PageMetadata,
    Post,
    build_index_body,
    build_post,
    output_stem,
)
from mdblog.providers import RemoteDocument


def make_post(filename: str, title: str, summary: str) -> Post:
    return Post(
        rendered_data=b"",
        output_filename=filename,
        metadata=PageMetadata(title=title, summary=summary),
    )


def test_output_stem():
    assert output_stem("hello-world.md") == "hello-world"
    assert output_stem("notes.markdown") == "notes.markdown"
    assert output_stem("a.md.md") == "a.md"


def test_build_post_extracts_metadata():
    document = RemoteDocument("hello.md", "https://x/hello.md", "file")
    html = b'<h1 id="hi">Hi</h1>\n<p>Intro &amp; more</p>\n'

    post = build_post(document, html, "hello")

    assert post.output_filename == "hello.html"
    assert post.rendered_data == html
    assert post.metadata == PageMetadata(title="Hi", summary="Intro & more")
    assert post.name == "hello.md"


def test_build_post_defaults():
    document = RemoteDocument("empty.md", "https://x/empty.md", "file")
    post = build_post(document, b"", "empty")
    assert post.metadata == PageMetadata(title="Untitled", summary="No summary")


def test_build_post_with_custom_extractor():
    class Fixed:
        def extract(self, content):
            return PageMetadata("Fixed", content)

    document = RemoteDocument("a.md", "https://x/a.md", "file")
    post = build_post(document, b"<p>raw</p>", "a", extractor=Fixed())
    assert post.metadata == PageMetadata("Fixed", "<p>raw</p>")


def test_index_body_blocks_and_separators():
    posts = [
        make_post("a.html", "T1", "S1"),
        make_post("b.html", "T2", "S2"),
        make_post("c.html", "T3", "S3"),
    ]

    body = build_index_body(posts)

    blocks = [
        '<h2>T1</h2><p>S1</p><a href="a.html">Read more...</a>',
        '<h2>T2</h2><p>S2</p><a href="b.html">Read more...</a>',
        '<h2>T3</h2><p>S3</p><a href="c.html">Read more...</a>',
    ]
    assert body == SEPARATOR.join(blocks)
    assert body.count(SEPARATOR) == 2
    assert not body.endswith(SEPARATOR)
    assert body.split(SEPARATOR) == blocks


def test_index_body_single_post_has_no_separator():
    body = build_index_body([make_post("a.html", "T", "S")])
    assert SEPARATOR not in body


def test_index_body_empty():
    assert build_index_body([]) == ""


def test_index_body_keeps_input_order():
    posts = [make_post("z.html", "Z", "z"), make_post("a.html", "A", "a")]
    body = build_index_body(posts)
    assert body.index("z.html") < body.index("a.html")
