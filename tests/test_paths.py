import pytest

from pipex.errors import CommandNotFoundError
from pipex.paths import find_path, resolve_command


def test_find_path_splits_and_drops_empty():
    assert find_path({"PATH": "/a:/b::/c"}) == ["/a", "/b", "/c"]


def test_find_path_missing():
    assert find_path({"HOME": "/home/user"}) is None


def test_find_path_ignores_similar_names():
    assert find_path({"MANPATH": "/x", "PATH": "/y"}) == ["/y"]


def test_resolve_first_directory_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "tool").write_text("")
    (second / "tool").write_text("")
    assert resolve_command("tool", [str(first), str(second)]) == f"{first}/tool"


def test_resolve_skips_directories_without_command(tmp_path):
    empty = tmp_path / "empty"
    full = tmp_path / "full"
    empty.mkdir()
    full.mkdir()
    (full / "tool").write_text("")
    assert resolve_command("tool", [str(empty), str(full)]) == f"{full}/tool"


def test_resolve_not_found(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command("absent", [str(tmp_path)])
    assert info.value.command == "absent"


def test_resolve_without_path():
    with pytest.raises(CommandNotFoundError):
        resolve_command("ls", None)


def test_resolve_empty_command(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command("", [str(tmp_path)])
    assert info.value.command == ""