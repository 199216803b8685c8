"""Repository URL parsing for mdblog.

This module turns a user-supplied repository URL such as
``https://github.com/owner/repo.git`` into a RepositoryRef.

Key names:
- HostKind: closed set of supported hosts.
- RepositoryRef: immutable (host, owner, name) triple.
- parse_repository_url: normalizes and validates a URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidURL, UnsupportedHost


class HostKind(Enum):
    """Supported source-control hosts, keyed by their host name."""

    GITHUB = "github.com"
    GITLAB = "gitlab.com"


@dataclass(frozen=True)
class RepositoryRef:
    """A repository on a supported host.

    Attributes:
        host_kind: Which host the repository lives on.
        owner: User or organization name.
        name: Repository name.
    """

    host_kind: HostKind
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        """Return ``owner/name``."""
        return f"{self.owner}/{self.name}"


def _normalize(url: str) -> str:
    """Strip whitespace, one trailing slash, ``.git`` and the scheme."""
    url = url.strip()
    url = url.removesuffix("/")
    url = url.removesuffix(".git")
    for scheme in ("http://", "https://"):
        if url.startswith(scheme):
            url = url[len(scheme) :]
            break
    return url


def parse_repository_url(url: str) -> RepositoryRef:
    """Parse a repository URL into a RepositoryRef.

    Accepts ``<host>/<owner>/<name>`` with an optional ``http(s)://`` scheme,
    trailing slash or ``.git`` suffix. Owner and name are kept verbatim.

    Args:
        url: Repository URL as typed by the user.

    Returns:
        RepositoryRef for the URL.

    Raises:
        InvalidURL: If the URL does not split into exactly three non-empty parts.
        UnsupportedHost: If the host is not one of HostKind's values.

    Examples:
        >>> parse_repository_url("https://github.com/made/blog.git")
        RepositoryRef(host_kind=<HostKind.GITHUB: 'github.com'>, owner='made', name='blog')
    """
    parts = _normalize(url).split("/")
    if len(parts) != 3 or not all(parts):
        raise InvalidURL(f"invalid git repository url: {url!r}")

    host, owner, name = parts
    try:
        host_kind = HostKind(host)
    except ValueError:
        raise UnsupportedHost(f"repository host is not supported: {host}") from None
    return RepositoryRef(host_kind=host_kind, owner=owner, name=name)
