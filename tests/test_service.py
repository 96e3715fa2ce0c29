import hashlib
import logging
import os
from pathlib import Path

import pytest

from fatcp.core.errors import EmptyName, FilesystemStat, InvalidPath, NotADirectory
from fatcp.core.progress import NoOpReporter
from fatcp.modules.fatcopy.schemas import CopyOptions
from fatcp.modules.fatcopy.service import FatCopyService, copy_to_fat


def _write(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def _sha1(path: Path) -> str:
    return hashlib.sha1(path.read_bytes()).hexdigest()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "srcRoot"
    _write(root / "Sub Dir!" / "My File?.txt", b"hello fat world")
    _write(root / "Top Level.MP3", os.urandom(2048))
    _write(root / "A Dir" / "Deeper Still" / "Track (01).flac", os.urandom(10_000))
    (root / "Empty Dir").mkdir()
    return root


def test_sample_scenario(tree: Path, tmp_path: Path):
    dest = tmp_path / "destRoot"
    copy_to_fat(tree, dest)

    copied = dest / "sub-dir" / "my-file.txt"
    assert (dest / "sub-dir").is_dir()
    assert copied.read_bytes() == b"hello fat world"


def test_every_file_copied_with_identical_content(tree: Path, tmp_path: Path):
    dest = tmp_path / "out"
    items = FatCopyService(tree, dest).apply()

    expected = {
        dest / "sub-dir" / "my-file.txt": tree / "Sub Dir!" / "My File?.txt",
        dest / "top-level.MP3": tree / "Top Level.MP3",
        dest / "a-dir" / "deeper-still" / "track-01.flac": tree / "A Dir" / "Deeper Still" / "Track (01).flac",
    }
    assert {Path(i.destination) for i in items} == set(expected)
    for dst, src in expected.items():
        assert _sha1(dst) == _sha1(src)
    for item in items:
        assert item.bytes_copied == Path(item.source).stat().st_size


def test_depth_is_preserved(tree: Path, tmp_path: Path):
    dest = tmp_path / "out"
    for item in FatCopyService(tree, dest).apply():
        src_depth = len(Path(item.source).relative_to(tree).parts)
        dst_depth = len(Path(item.destination).relative_to(dest).parts)
        assert src_depth == dst_depth


def test_empty_directories_are_not_materialized(tree: Path, tmp_path: Path):
    dest = tmp_path / "out"
    FatCopyService(tree, dest).apply()
    assert not (dest / "empty-dir").exists()


def test_created_dir_flag(tree: Path, tmp_path: Path):
    dest = tmp_path / "out"
    items = {Path(i.destination).name: i for i in FatCopyService(tree, dest).apply()}
    assert items["my-file.txt"].created_dir is True
    assert items["track-01.flac"].created_dir is True


def test_order_is_lexical(tree: Path, tmp_path: Path):
    pairs = FatCopyService(tree, tmp_path / "out").plan()
    sources = [Path(s).relative_to(tree).as_posix() for s, _ in pairs]
    assert sources == [
        "Top Level.MP3",
        "A Dir/Deeper Still/Track (01).flac",
        "Sub Dir!/My File?.txt",
    ]


def test_plan_writes_nothing(tree: Path, tmp_path: Path):
    dest = tmp_path / "out"
    pairs = FatCopyService(tree, dest).plan(reporter=NoOpReporter())
    assert len(pairs) == 3
    assert not dest.exists()


def test_existing_destination_is_overwritten(tree: Path, tmp_path: Path):
    dest = tmp_path / "out"
    _write(dest / "sub-dir" / "my-file.txt", b"stale and much longer content")
    copy_to_fat(tree, dest)
    assert (dest / "sub-dir" / "my-file.txt").read_bytes() == b"hello fat world"


def test_error_aborts_and_keeps_earlier_copies(tmp_path: Path):
    src = tmp_path / "src"
    _write(src / "a.txt", b"a")
    _write(src / "!!!" / "x.txt", b"x")
    _write(src / "zzz" / "z.txt", b"z")
    dest = tmp_path / "out"

    with pytest.raises(EmptyName):
        copy_to_fat(src, dest)
    assert (dest / "a.txt").read_bytes() == b"a"
    assert not (dest / "zzz").exists()


def test_source_must_be_a_directory(tmp_path: Path):
    f = _write(tmp_path / "file.txt", b"x")
    with pytest.raises(NotADirectory):
        FatCopyService(f, tmp_path / "out").plan()


def test_destination_inside_source_is_rejected(tree: Path):
    with pytest.raises(InvalidPath):
        FatCopyService(tree, tree / "copy").apply()


def test_verbose_logs_each_copy(tree: Path, tmp_path: Path, caplog):
    caplog.set_level(logging.INFO, logger="fatcp")
    dest = tmp_path / "out"
    FatCopyService(tree, dest, CopyOptions(verbose=True)).apply()
    src = tree / "Sub Dir!" / "My File?.txt"
    assert f"copied {src} to {dest / 'sub-dir' / 'my-file.txt'}" in caplog.text
    assert f"creating directory {dest / 'sub-dir'}" in caplog.text


def test_quiet_by_default(tree: Path, tmp_path: Path, caplog):
    caplog.set_level(logging.INFO, logger="fatcp")
    FatCopyService(tree, tmp_path / "out").apply()
    assert "copied" not in caplog.text


class _RecordingReporter:
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def start(self, phase, total=None, text=None):
        self.events.append(("start", phase, total))

    def update(self, phase, advance=1, text=None):
        self.events.append(("update", phase, advance))

    def end(self, phase):
        self.events.append(("end", phase))


def test_reporter_sees_scan_then_copy(tree: Path, tmp_path: Path):
    reporter = _RecordingReporter()
    FatCopyService(tree, tmp_path / "out").apply(reporter=reporter)

    starts = [e for e in reporter.events if e[0] == "start"]
    assert starts == [("start", "scan", None), ("start", "copy", 3)]
    assert sum(1 for e in reporter.events if e[:2] == ("update", "copy")) == 3
    assert reporter.events[-1] == ("end", "copy")


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="root can read directories regardless of mode",
)
def test_unreadable_subdirectory_aborts(tmp_path: Path):
    src = tmp_path / "src"
    _write(src / "a.txt", b"a")
    locked = src / "locked"
    _write(locked / "b.txt", b"b")
    locked.chmod(0)
    dest = tmp_path / "out"
    try:
        with pytest.raises(FilesystemStat) as exc:
            FatCopyService(src, dest).apply()
    finally:
        locked.chmod(0o755)
    assert exc.value.path == str(locked)
    assert isinstance(exc.value.__cause__, PermissionError)
    assert (dest / "a.txt").read_bytes() == b"a"
