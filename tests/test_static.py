from pathlib import Path

import pytest

from quire.config import QuireConfig
from quire.exceptions import StaticFileCopyError
from quire.static import StaticFile, copy_site_files, copy_static_files, discover_static_files


def _make_files(root: Path) -> None:
    (root / "css").mkdir(parents=True)
    (root / "css" / "site.css").write_text("body {}", encoding="utf-8")
    (root / "logo.svg").write_text("<svg/>", encoding="utf-8")


def test_discover_maps_to_output_tree(tmp_path: Path) -> None:
    files_root = tmp_path / "files"
    _make_files(files_root)

    files = discover_static_files(files_root, tmp_path / "build")

    assert sorted(files, key=lambda f: f.source_path) == [
        StaticFile(files_root / "css" / "site.css", tmp_path / "build" / "css" / "site.css"),
        StaticFile(files_root / "logo.svg", tmp_path / "build" / "logo.svg"),
    ]


def test_discover_missing_root(tmp_path: Path) -> None:
    assert discover_static_files(tmp_path / "nothing", tmp_path / "build") == []


def test_copy_creates_folders_and_counts(tmp_path: Path) -> None:
    files_root = tmp_path / "files"
    _make_files(files_root)
    files = discover_static_files(files_root, tmp_path / "build")

    assert copy_static_files(files, max_workers=2) == 2
    assert (tmp_path / "build" / "css" / "site.css").read_text(encoding="utf-8") == "body {}"


def test_copy_nothing() -> None:
    assert copy_static_files([]) == 0


def test_copy_failure_raises(tmp_path: Path) -> None:
    missing = StaticFile(tmp_path / "missing.txt", tmp_path / "out" / "missing.txt")

    with pytest.raises(StaticFileCopyError) as excinfo:
        copy_static_files([missing])

    assert excinfo.value.source_path == missing.source_path


def test_copy_site_files_uses_config_paths(tmp_path: Path) -> None:
    _make_files(tmp_path / "assets")
    config = QuireConfig.model_validate(
        {"paths": {"site_root": str(tmp_path), "files_dir": "assets", "output_dir": "public"}}
    )

    assert copy_site_files(config) == 2
    assert (tmp_path / "public" / "logo.svg").exists()
