import pytest

from selenium_testcase import InvalidArgument
from selenium_testcase.utils import Filesystem


def test_put_writes_content(tmp_path):
    target = tmp_path / "source.html"

    assert Filesystem().put(str(target), "<html>héllo</html>") is True

    assert target.read_text(encoding="utf-8") == "<html>héllo</html>"


def test_put_replaces_existing_file(tmp_path):
    target = tmp_path / "source.html"
    target.write_text("old", encoding="utf-8")

    Filesystem().put(target, "new")

    assert target.read_text(encoding="utf-8") == "new"


def test_put_into_missing_directory_raises(tmp_path):
    target = tmp_path / "missing" / "source.html"

    with pytest.raises(InvalidArgument):
        Filesystem().put(str(target), "<html></html>")

    assert not target.parent.exists()


def test_put_onto_a_directory_raises(tmp_path):
    with pytest.raises(InvalidArgument):
        Filesystem().put(str(tmp_path), "<html></html>")


def test_put_with_embedded_null_byte_raises(tmp_path):
    with pytest.raises(InvalidArgument) as exc_info:
        Filesystem().put(str(tmp_path / "a\0b.html"), "x")

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_put_with_overlong_path_raises(tmp_path):
    with pytest.raises(InvalidArgument):
        Filesystem().put(str(tmp_path / ("a" * 300) / "x.html"), "x")
