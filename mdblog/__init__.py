"""mdblog static blog generator.

This package turns the Markdown documents stored at the root of a remote
source-control repository into a static HTML site: one page per document
plus an index page summarizing every document.

The main entry point is the CLI module, which provides the command for
generating a site from a repository URL.

Architecture:
- source: parses repository URLs into a RepositoryRef.
- providers: lists documents from a remote host (one class per host).
- fetcher: downloads raw document bytes.
- renderers / extractors: Markdown to HTML, then title and summary.
- content: assembles posts and the index body.
- build: drives the whole pass and writes the output directory.
"""

__all__ = ["__version__"]
__version__ = "1.0.0"
