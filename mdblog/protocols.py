"""Protocol definitions for mdblog.

This module defines the interfaces the generation pipeline depends on.
The pipeline in build.py only talks to these abstractions, so a new host
or a different template engine plugs in without touching the pipeline.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .content import PageMetadata
    from .providers import RemoteDocument
    from .source import HostKind, RepositoryRef


@runtime_checkable
class ContentProvider(Protocol):
    """Protocol for listing the documents of a remote repository.

    There is one implementation per HostKind. Implementations translate the
    host's listing format into RemoteDocument entries, one per raw entry,
    in the order the host returned them.
    """

    @property
    @abstractmethod
    def host_kind(self) -> HostKind:
        """Return the host this provider serves."""
        ...

    @abstractmethod
    def list_documents(
        self,
        ref: RepositoryRef,
        branch: str,
        credential: str | None = None,
        is_private: bool = False,
    ) -> list[RemoteDocument]:
        """List the documents at the root of a repository.

        Args:
            ref: Repository to list.
            branch: Branch to list.
            credential: Optional access token.
            is_private: Whether the repository requires a credential.

        Returns:
            List of RemoteDocument objects in provider order.
        """
        ...


@runtime_checkable
class ContentRenderer(Protocol):
    """Protocol for turning raw document bytes into HTML bytes."""

    @abstractmethod
    def render(self, source: bytes) -> bytes:
        """Render source bytes to HTML bytes.

        Args:
            source: Raw document content.

        Returns:
            Rendered HTML.
        """
        ...


@runtime_checkable
class MetadataExtractor(Protocol):
    """Protocol for pulling page metadata out of rendered HTML."""

    @abstractmethod
    def extract(self, html: str) -> PageMetadata:
        """Extract metadata from rendered HTML.

        Args:
            html: Rendered HTML as text.

        Returns:
            PageMetadata for the page.
        """
        ...


@runtime_checkable
class TemplateRenderer(Protocol):
    """Protocol for wrapping page bodies in the site layout.

    Both methods receive the recognized substitution keys
    ``title``, ``name`` and ``contents``.
    """

    @abstractmethod
    def render_index(self, title: str, name: str, contents: str) -> str:
        """Render the homepage."""
        ...

    @abstractmethod
    def render_post(self, title: str, name: str, contents: str) -> str:
        """Render a single post page."""
        ...
