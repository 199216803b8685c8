"""Site building functionality for mdblog.

This module contains the generation pipeline. It resolves the repository,
lists its documents, renders each Markdown document into a page, and
writes the homepage summarizing them.

The pass is linear and sequential: identify, list, then for each document
fetch, render, extract and assemble, then synthesize the index. The first
error raised by any step propagates unchanged and aborts the run; pages
written before the failure are left in place.

Key functions:
- build_site: Main function to build the entire site.
- load_config: Loads configuration from mdblog.yaml.
- select_documents: Keeps the listing entries that become posts.
- check_output_dir: Guards the output directory before it is wiped.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .content import Post, build_index_body, build_post, output_stem
from .errors import UnsafeOutputDir
from .fetcher import ContentFetcher
from .logging import get_logger
from .providers import ProviderRegistry, RemoteDocument
from .renderers import MarkdownRenderer
from .source import RepositoryRef, parse_repository_url
from .templates import TemplateEngine
from .utils import copy_tree, ensure_clean_dir, is_blank, is_markdown, titleize

logger = get_logger("build")

CONFIG_FILENAME = "mdblog.yaml"
INDEX_FILENAME = "index.html"
ASSETS_DIRNAME = "assets"

DEFAULT_CONFIG = {
    "output_dir": "output",
    "branch": "master",
    "title": "",
    "theme_dir": None,
    "filter_markdown": True,
}


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        posts: Posts written, in listing order.
        output_dir: Directory where the site was built.
        repository: Repository the site was built from.
    """

    posts: list[Post]
    output_dir: Path
    repository: RepositoryRef


def load_config(project_root: Path) -> dict[str, Any]:
    """Load configuration from mdblog.yaml.

    Args:
        project_root: Directory to look for the config file in.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = project_root / CONFIG_FILENAME
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    return config


def select_documents(documents: Iterable[RemoteDocument]) -> list[RemoteDocument]:
    """Keep the Markdown files of a listing, preserving order.

    Args:
        documents: Listing entries as returned by a provider.

    Returns:
        Entries of kind ``file`` whose name ends in ``.md``.
    """
    return [
        doc for doc in documents if doc.kind == "file" and is_markdown(doc.name)
    ]


def build_site(
    repo_url: str,
    output_dir: Path,
    branch: str = "master",
    token: str | None = None,
    title: str | None = None,
    theme_dir: Path | None = None,
    filter_markdown: bool = True,
    clean_output: bool = True,
    providers: ProviderRegistry | None = None,
    fetcher: ContentFetcher | None = None,
    renderer: MarkdownRenderer | None = None,
    engine: TemplateEngine | None = None,
) -> BuildResult:
    """Build the entire static site.

    A non-blank token marks the repository as private.

    Args:
        repo_url: Repository URL, e.g. ``https://github.com/owner/name``.
        output_dir: Directory to write the site into.
        branch: Branch to read documents from.
        token: Optional access token.
        title: Site title; defaults to the titleized repository name.
        theme_dir: Optional directory with templates and an ``assets/`` folder.
        filter_markdown: Whether to skip listing entries that are not Markdown files.
        clean_output: Whether to wipe the output directory before writing.
            The directory must not hold the working directory or the theme.
        providers: Optional provider registry.
        fetcher: Optional content fetcher.
        renderer: Optional Markdown renderer.
        engine: Optional template engine.

    Returns:
        BuildResult with the posts written and the output directory.
    """
    ref = parse_repository_url(repo_url)
    if clean_output:
        check_output_dir(output_dir, theme_dir)
    token = token.strip() if token else None
    providers = providers or ProviderRegistry()
    fetcher = fetcher or ContentFetcher()
    renderer = renderer or MarkdownRenderer()
    engine = engine or TemplateEngine(theme_dir)
    site_name = title or titleize(ref.name)

    documents = providers.list_documents(
        ref, branch, credential=token, is_private=not is_blank(token)
    )
    logger.info("Listed %d entries in %s", len(documents), ref.full_name)
    if filter_markdown:
        documents = select_documents(documents)

    if clean_output:
        ensure_clean_dir(output_dir)
    else:
        output_dir.mkdir(parents=True, exist_ok=True)

    posts: list[Post] = []
    for document in documents:
        post = generate_post(document, fetcher, renderer)
        page = engine.render_post(
            title=post.metadata.title,
            name=site_name,
            contents=post.rendered_data.decode("utf-8"),
        )
        _write_page(output_dir, post.output_filename, page)
        posts.append(post)

    if any(post.output_filename == INDEX_FILENAME for post in posts):
        logger.warning("index.md is overwritten by the generated homepage")
    index = engine.render_index(
        title=site_name, name=site_name, contents=build_index_body(posts)
    )
    _write_page(output_dir, INDEX_FILENAME, index)

    if theme_dir is not None and (theme_dir / ASSETS_DIRNAME).is_dir():
        copied = copy_tree(theme_dir / ASSETS_DIRNAME, output_dir / ASSETS_DIRNAME)
        logger.debug("Copied %d theme assets", copied)

    return BuildResult(posts=posts, output_dir=output_dir, repository=ref)


def check_output_dir(output_dir: Path, theme_dir: Path | None = None) -> None:
    """Refuse an output directory whose wipe would delete sources.

    Raises:
        UnsafeOutputDir: If output_dir is the working directory or one of its
            ancestors, or if it contains theme_dir.
    """
    target = output_dir.resolve()
    cwd = Path.cwd().resolve()
    if target == cwd or target in cwd.parents:
        raise UnsafeOutputDir(
            f"refusing to clean {output_dir}: it contains the working directory"
        )
    if theme_dir is not None:
        theme = theme_dir.resolve()
        if theme == target or target in theme.parents:
            raise UnsafeOutputDir(
                f"refusing to clean {output_dir}: it contains the theme {theme_dir}"
            )


def generate_post(
    document: RemoteDocument,
    fetcher: ContentFetcher,
    renderer: MarkdownRenderer,
) -> Post:
    """Fetch, render and assemble a single document.

    Args:
        document: Listing entry to process.
        fetcher: Fetcher used to download the document.
        renderer: Renderer used to convert it to HTML.

    Returns:
        Post for the document.
    """
    source = fetcher.fetch(document.download_url)
    rendered = renderer.render(source)
    return build_post(document, rendered, output_stem(document.name))


def _write_page(output_dir: Path, filename: str, rendered: str) -> None:
    """Write a rendered page to the output directory.

    Args:
        output_dir: Base output directory.
        filename: Name of the page file.
        rendered: Rendered HTML content.
    """
    html_path = output_dir / filename
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(rendered)
    logger.debug("Wrote %s", html_path)
