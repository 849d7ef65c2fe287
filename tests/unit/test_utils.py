"""Unit tests for utils.py"""

import datetime as dt

import pytest

from blogsmith.errors import OutputError
from blogsmith.utils import clean_output_dir, format_date, parse_bool, parse_int


@pytest.mark.parametrize("value,expected", [
    (True, True),
    ("yes", True),
    (" On ", True),
    ("1", True),
    ("false", False),
    ("", False),
    (None, False),
    (0, False),
    (2, True),
])
def test_parse_bool(value, expected):
    """Front matter and config flags accept the usual spellings."""
    assert parse_bool(value) is expected


def test_parse_int_falls_back_to_default():
    """Unparsable values yield the default."""
    assert parse_int("12", 3) == 12
    assert parse_int("twelve", 3) == 3
    assert parse_int(None, 3) == 3


def test_format_date():
    """Dates render as YYYY-MM-DD."""
    assert format_date(dt.date(2024, 3, 5)) == "2024-03-05"


def test_clean_output_dir_removes_tree(tmp_path):
    """The output directory is removed when it lives inside the project."""
    out = tmp_path / "output"
    (out / "old").mkdir(parents=True)
    clean_output_dir(out, tmp_path)
    assert not out.exists()


def test_clean_output_dir_refuses_project_root(tmp_path):
    """Cleaning the project root itself is refused."""
    with pytest.raises(OutputError, match="project root"):
        clean_output_dir(tmp_path, tmp_path)


def test_clean_output_dir_refuses_outside_root(tmp_path):
    """Cleaning a directory outside the project is refused."""
    project = tmp_path / "project"
    project.mkdir()
    outside = tmp_path / "elsewhere"
    outside.mkdir()
    with pytest.raises(OutputError, match="outside project root"):
        clean_output_dir(outside, project)
    assert outside.exists()
