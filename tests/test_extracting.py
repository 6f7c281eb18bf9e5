import pytest

from fsshell.extracting import (
    format_listing,
    legacy_output_name,
    plan_directories,
    select_entries,
    target_path,
)


def test_legacy_output_name_strips_zip():
    assert legacy_output_name("backup.zip") + ".zip" == "backup.zip"
    assert not legacy_output_name("backup.zip").endswith(".zip")


def test_legacy_output_name_appends_out():
    name = "notes"
    assert legacy_output_name(name) == name + ".out"


def test_select_entries_without_patterns_keeps_all():
    files = [("a.txt", b"1"), ("dir/", b""), ("dir/b.txt", b"22")]
    assert select_entries(files, []) == files


def test_select_entries_filters_by_substring():
    files = [("a.txt", b"1"), ("dir/", b""), ("dir/b.log", b"22")]
    assert select_entries(files, [".txt"]) == [("a.txt", b"1")]
    assert select_entries(files, ["dir"]) == files[1:]
    assert select_entries(files, ["missing"]) == []


@pytest.mark.parametrize("path", ["a.txt", "x/y/z"])
def test_target_path(path):
    assert target_path(".", path) == path
    assert target_path("out", path) == "out/" + path


def test_plan_directories_for_nested_file():
    assert plan_directories(".", ["a/b/c.txt"]) == ["a", "a/b"]


def test_plan_directories_for_directory_entry():
    assert plan_directories("out", ["x/"]) == ["out/x"]


def test_plan_directories_parents_first_and_unique():
    paths = ["top/", "top/mid/", "top/mid/deep/f.txt", "top/g.txt", "h.txt"]
    planned = plan_directories("dest", paths)
    assert len(planned) == len(set(planned))
    for directory in planned:
        parent, sep, _ = directory.rpartition("/")
        if sep:
            assert parent in planned
            assert planned.index(parent) < planned.index(directory)


def test_plan_directories_plain_files_need_nothing():
    assert plan_directories(".", ["one.txt", "two.txt"]) == []


def test_format_listing_layout():
    files = [("dir/", b""), ("dir/a.txt", b"hello")]
    lines = format_listing("pack.zip", files).split("\n")
    assert lines[0] == "Archive: pack.zip"
    assert lines[1] == "  Length      Date    Time    Name"
    assert lines[2] == "---------  ---------- -----   ----"
    assert lines[3].endswith("   dir/")
    assert lines[4].split()[0] == str(len(b"hello"))
    assert lines[4].endswith("dir/a.txt")
    assert lines[5] == "---------                     -------"
    assert lines[6].endswith(f"{len(files)} files")
    assert len(lines) == 7


def test_format_listing_empty():
    lines = format_listing("empty.zip", []).split("\n")
    assert lines[-1].endswith("0 files")
    assert lines[-1].split()[0] == "0"