"""Content providers for mdblog.

This module contains implementations of the ContentProvider protocol, one
per supported host, and the registry the pipeline dispatches through.

Key classes:
- RemoteDocument: One entry of a repository listing.
- GitHubProvider: Lists repository contents through the GitHub REST API.
- GitLabProvider: Declared host without a working implementation.
- ProviderRegistry: Maps HostKind to the provider serving it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from .errors import (
    MissingCredential,
    ProviderRequestFailed,
    ProviderResponseMalformed,
    UnsupportedProvider,
)
from .logging import get_logger
from .source import HostKind, RepositoryRef
from .utils import is_blank

logger = get_logger("providers")

GITHUB_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class RemoteDocument:
    """A retrievable entry of a repository listing.

    Attributes:
        name: File name as shown by the host (e.g. ``hello.md``).
        download_url: Direct download URL; empty for entries without one.
        kind: Entry kind reported by the host (``file``, ``dir``, ...).
    """

    name: str
    download_url: str
    kind: str


class GitHubProvider:
    """Lists the root contents of a GitHub repository.

    Attributes:
        base_url: Root of the GitHub REST API.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = GITHUB_API_URL,
    ):
        """Initialize the provider.

        Args:
            client: Optional HTTP client; a short-lived one is used per call otherwise.
            base_url: Root of the GitHub REST API.
        """
        self._client = client
        self.base_url = base_url.rstrip("/")

    @property
    def host_kind(self) -> HostKind:
        """Return the host this provider serves."""
        return HostKind.GITHUB

    def list_documents(
        self,
        ref: RepositoryRef,
        branch: str,
        credential: str | None = None,
        is_private: bool = False,
    ) -> list[RemoteDocument]:
        """List the documents at the root of a GitHub repository.

        Args:
            ref: Repository to list.
            branch: Branch to list, sent as the ``ref`` query parameter.
                An empty branch lists the default branch.
            credential: Optional access token, sent as a bearer token.
            is_private: Whether the repository requires a credential.

        Returns:
            One RemoteDocument per listing entry, in listing order.

        Raises:
            MissingCredential: If is_private is set and credential is blank.
            ProviderRequestFailed: If the request fails or returns a non-2xx status.
            ProviderResponseMalformed: If the body is not a listing.
        """
        if is_private and is_blank(credential):
            raise MissingCredential(
                "missing authorization token for private github repository"
            )

        headers = {"Accept": "application/vnd.github+json"}
        if not is_blank(credential):
            headers["Authorization"] = f"Bearer {credential}"
        params = {"ref": branch} if branch else None
        url = f"{self.base_url}/repos/{ref.owner}/{ref.name}/contents"

        logger.debug("Listing %s (branch %r)", url, branch)
        response = self._send(url, headers, params)
        if not response.is_success:
            raise ProviderRequestFailed(
                f"failed to fetch github files: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return translate_github_listing(_decode_json(response))

    def _send(
        self, url: str, headers: dict[str, str], params: dict[str, str] | None
    ) -> httpx.Response:
        """Send the listing request, mapping transport errors."""
        try:
            if self._client is not None:
                return self._client.get(
                    url, headers=headers, params=params, follow_redirects=True
                )
            with httpx.Client(follow_redirects=True) as client:
                return client.get(url, headers=headers, params=params)
        except httpx.HTTPError as exc:
            raise ProviderRequestFailed(
                f"failed to send github http request: {exc}"
            ) from exc


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ProviderResponseMalformed(
            f"failed to parse github response body: {exc}"
        ) from exc


def translate_github_listing(payload: Any) -> list[RemoteDocument]:
    """Translate a decoded GitHub contents listing into RemoteDocument entries.

    Every entry must be an object with string ``name`` and ``type`` keys and a
    ``download_url`` that is a string or null (GitHub reports null for
    directories). No entry is dropped.

    Args:
        payload: Decoded JSON body.

    Returns:
        List of RemoteDocument objects, in payload order.

    Raises:
        ProviderResponseMalformed: If the payload does not match the schema.
    """
    if not isinstance(payload, list):
        raise ProviderResponseMalformed(
            "failed to parse github response body: expected a JSON array"
        )
    documents: list[RemoteDocument] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise ProviderResponseMalformed(
                f"failed to parse github response body: entry {index} is not an object"
            )
        name = entry.get("name")
        kind = entry.get("type")
        download_url = entry.get("download_url")
        if not isinstance(name, str) or not isinstance(kind, str):
            raise ProviderResponseMalformed(
                f"failed to parse github response body: entry {index} lacks name or type"
            )
        if download_url is not None and not isinstance(download_url, str):
            raise ProviderResponseMalformed(
                f"failed to parse github response body: entry {index} has a bad download_url"
            )
        documents.append(
            RemoteDocument(name=name, download_url=download_url or "", kind=kind)
        )
    return documents


class GitLabProvider:
    """Placeholder for GitLab repositories.

    GitLab URLs parse, but listing them is not implemented yet.
    """

    @property
    def host_kind(self) -> HostKind:
        """Return the host this provider serves."""
        return HostKind.GITLAB

    def list_documents(
        self,
        ref: RepositoryRef,
        branch: str,
        credential: str | None = None,
        is_private: bool = False,
    ) -> list[RemoteDocument]:
        """Always raise UnsupportedProvider."""
        raise UnsupportedProvider("gitlab is not supported yet")


class ProviderRegistry:
    """Registry of content providers keyed by host kind.

    Adding a host means registering one more provider; callers keep
    dispatching through get_provider.
    """

    def __init__(self, client: httpx.Client | None = None):
        """Initialize the registry with the default providers.

        Args:
            client: Optional HTTP client shared by the default providers.
        """
        self._providers: dict[HostKind, Any] = {}
        self.register(GitHubProvider(client=client))
        self.register(GitLabProvider())

    def register(self, provider) -> None:
        """Register a provider, replacing any provider for the same host.

        Args:
            provider: A ContentProvider implementation.
        """
        self._providers[provider.host_kind] = provider

    def get_provider(self, host_kind: HostKind):
        """Return the provider for a host kind.

        Args:
            host_kind: Host to look up.

        Returns:
            The registered ContentProvider.

        Raises:
            UnsupportedProvider: If no provider is registered for the host.
        """
        try:
            return self._providers[host_kind]
        except KeyError:
            raise UnsupportedProvider(
                f"repository host is not supported: {host_kind.value}"
            ) from None

    def list_documents(
        self,
        ref: RepositoryRef,
        branch: str,
        credential: str | None = None,
        is_private: bool = False,
    ) -> list[RemoteDocument]:
        """List documents through the provider registered for ``ref``'s host."""
        provider = self.get_provider(ref.host_kind)
        return provider.list_documents(
            ref, branch, credential=credential, is_private=is_private
        )
