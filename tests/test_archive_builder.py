import zipfile

import pytest

from central_publish.modules.bundleupload.archive import ArchiveBuilder
from central_publish.modules.bundleupload.domain import ArchiveError


def _make_tree(root):
    (root / "com" / "acme" / "widget" / "1.2.3").mkdir(parents=True)
    (root / "com" / "acme" / "widget" / "1.2.3" / "widget-1.2.3.jar").write_bytes(bytes(range(256)) * 40)
    (root / "com" / "acme" / "widget" / "1.2.3" / "widget-1.2.3.pom").write_text("<project/>")
    (root / "com" / "acme" / "empty").mkdir()
    return root


def test_entries_follow_walk_order_with_directory_entries(tmp_path):
    staging = _make_tree(tmp_path / "staging")
    bundle = tmp_path / "out" / "bundle.zip"

    ArchiveBuilder().build(staging, bundle)

    with zipfile.ZipFile(bundle) as archive:
        names = archive.namelist()
    assert names == [
        "com/",
        "com/acme/",
        "com/acme/empty/",
        "com/acme/widget/",
        "com/acme/widget/1.2.3/",
        "com/acme/widget/1.2.3/widget-1.2.3.jar",
        "com/acme/widget/1.2.3/widget-1.2.3.pom",
    ]


def test_round_trip_extract_reproduces_tree(tmp_path):
    staging = _make_tree(tmp_path / "staging")
    bundle = tmp_path / "bundle.zip"
    ArchiveBuilder().build(staging, bundle)

    extracted = tmp_path / "extracted"
    with zipfile.ZipFile(bundle) as archive:
        assert archive.testzip() is None
        archive.extractall(extracted)

    for source in staging.rglob("*"):
        target = extracted / source.relative_to(staging)
        if source.is_dir():
            assert target.is_dir()
        else:
            assert target.read_bytes() == source.read_bytes()


def test_reproducible_builds_are_byte_identical(tmp_path):
    staging = _make_tree(tmp_path / "staging")
    first = tmp_path / "first.zip"
    second = tmp_path / "second.zip"

    ArchiveBuilder(reproducible=True).build(staging, first)
    ArchiveBuilder(reproducible=True).build(staging, second)

    assert first.read_bytes() == second.read_bytes()


def test_non_reproducible_build_keeps_file_timestamps(tmp_path):
    staging = _make_tree(tmp_path / "staging")
    bundle = tmp_path / "bundle.zip"

    ArchiveBuilder(reproducible=False).build(staging, bundle)

    with zipfile.ZipFile(bundle) as archive:
        info = archive.getinfo("com/acme/widget/1.2.3/widget-1.2.3.pom")
    assert info.date_time[0] > 1980


def test_missing_staging_root_raises_archive_error(tmp_path):
    with pytest.raises(ArchiveError):
        ArchiveBuilder().build(tmp_path / "missing", tmp_path / "bundle.zip")


def test_unwritable_output_raises_archive_error(tmp_path):
    staging = _make_tree(tmp_path / "staging")
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory is expected")

    with pytest.raises(ArchiveError) as excinfo:
        ArchiveBuilder().build(staging, blocker / "bundle.zip")

    assert excinfo.value.path == blocker / "bundle.zip"
