import pytest

from mdblog.errors import InvalidURL, UnsupportedHost
from mdblog.source import HostKind, RepositoryRef, parse_repository_url


@pytest.mark.parametrize(
    "url",
    [
        "github.com/made/blog",
        "https://github.com/made/blog",
        "http://github.com/made/blog",
        "https://github.com/made/blog/",
        "https://github.com/made/blog.git",
        "github.com/made/blog.git",
        "  https://github.com/made/blog  ",
    ],
)
def test_parse_ignores_decorations(url):
    ref = parse_repository_url(url)
    assert ref == RepositoryRef(HostKind.GITHUB, "made", "blog")


def test_parse_gitlab_host():
    ref = parse_repository_url("https://gitlab.com/group/project")
    assert ref.host_kind is HostKind.GITLAB
    assert ref.full_name == "group/project"


def test_parse_keeps_owner_and_name_verbatim():
    ref = parse_repository_url("github.com/Some%20One/My.Repo")
    assert ref.owner == "Some%20One"
    assert ref.name == "My.Repo"


def test_parse_unsupported_host():
    with pytest.raises(UnsupportedHost):
        parse_repository_url("ftp.example.com/a/b")


def test_parse_host_match_is_exact():
    with pytest.raises(UnsupportedHost):
        parse_repository_url("GitHub.com/a/b")
    with pytest.raises(UnsupportedHost):
        parse_repository_url("www.github.com/a/b")


@pytest.mark.parametrize(
    "url",
    [
        "github.com/a",
        "github.com",
        "",
        "github.com/a/b/c",
        "github.com//b",
        "https://github.com/a/b//",
    ],
)
def test_parse_invalid_url(url):
    with pytest.raises(InvalidURL):
        parse_repository_url(url)


def test_only_one_trailing_slash_is_stripped():
    # "github.com/a/b//" keeps one slash, leaving an empty fourth segment.
    with pytest.raises(InvalidURL):
        parse_repository_url("github.com/a/b//")


def test_repository_ref_is_immutable():
    ref = parse_repository_url("github.com/a/b")
    with pytest.raises(AttributeError):
        ref.owner = "c"
