"""Error types for mdblog.

Every failure the generation pipeline can hit is a subclass of MdBlogError.
None of them are retried: the first one raised aborts the run, and the CLI
turns it into a message on stderr and a non-zero exit status.

Key classes:
- InvalidURL, UnsupportedHost: repository URL parsing.
- MissingCredential, ProviderRequestFailed, ProviderResponseMalformed,
  UnsupportedProvider: document listing.
- DownloadFailed, ReadFailed: document download.
- UnsafeOutputDir: output directory that must not be wiped.
"""

from __future__ import annotations


class MdBlogError(Exception):
    """Base class for all mdblog errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidURL(MdBlogError):
    """Repository URL does not have the host/owner/name shape."""


class UnsupportedHost(MdBlogError):
    """Repository URL points at a host with no known provider."""


class MissingCredential(MdBlogError):
    """A private repository was requested without an access token."""


class ProviderRequestFailed(MdBlogError):
    """The listing request could not be sent or returned a non-success status.

    Attributes:
        status_code: HTTP status of the response, None on transport failure.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ProviderResponseMalformed(MdBlogError):
    """The listing response body does not match the expected schema."""


class UnsupportedProvider(MdBlogError):
    """The host kind is recognized but has no working provider."""


class DownloadFailed(MdBlogError):
    """A document could not be downloaded."""


class ReadFailed(MdBlogError):
    """A document response body could not be fully read."""


class UnsafeOutputDir(MdBlogError):
    """The output directory would wipe the project or the theme."""


__all__ = [
    "DownloadFailed",
    "InvalidURL",
    "MdBlogError",
    "MissingCredential",
    "ProviderRequestFailed",
    "ProviderResponseMalformed",
    "ReadFailed",
    "UnsafeOutputDir",
    "UnsupportedHost",
    "UnsupportedProvider",
]
