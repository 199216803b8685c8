import logging

from mdblog import utils
from mdblog.logging import configure_logging, get_logger


def test_titleize():
    assert utils.titleize("getting-started.md") == "Getting Started"
    assert utils.titleize("my_first-post") == "My First Post"
    assert utils.titleize("blog") == "Blog"
    assert utils.titleize("") == ""


def test_is_markdown():
    assert utils.is_markdown("post.md")
    assert not utils.is_markdown("post.MD")
    assert not utils.is_markdown("README")
    assert not utils.is_markdown("notes.md.txt")


def test_is_blank():
    assert utils.is_blank(None)
    assert utils.is_blank("")
    assert utils.is_blank(" \t\n")
    assert not utils.is_blank(" x ")


def test_ensure_clean_dir(tmp_path):
    target = tmp_path / "out"
    (target / "nested").mkdir(parents=True)
    (target / "nested" / "file.txt").write_text("x", encoding="utf-8")

    utils.ensure_clean_dir(target)

    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_ensure_clean_dir_creates_missing(tmp_path):
    target = tmp_path / "a" / "b"
    utils.ensure_clean_dir(target)
    assert target.is_dir()


def test_copy_tree(tmp_path):
    source = tmp_path / "src"
    (source / "css").mkdir(parents=True)
    (source / "css" / "main.css").write_text("body{}", encoding="utf-8")
    (source / "logo.svg").write_text("<svg/>", encoding="utf-8")

    copied = utils.copy_tree(source, tmp_path / "dest")

    assert copied == 2
    assert (tmp_path / "dest" / "css" / "main.css").read_text(encoding="utf-8") == "body{}"
    assert (tmp_path / "dest" / "logo.svg").exists()


def test_get_logger_hierarchy():
    assert get_logger().name == "mdblog"
    assert get_logger("build").name == "mdblog.build"


def test_configure_logging_levels():
    logger = configure_logging(verbose=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    logger = configure_logging()
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.propagate is False
