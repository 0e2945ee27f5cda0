"""Tests for RulesSynchronizer."""

from pathlib import Path

from global_rules.models import ErrorType, SyncFailure, SyncSuccess
from global_rules.synchronizer import RulesSynchronizer


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_missing_source_returns_single_error(tmp_path: Path) -> None:
    source = tmp_path / "missing"
    target = tmp_path / "target"

    result = RulesSynchronizer().sync(source, target)

    assert isinstance(result, SyncFailure)
    assert len(result.errors) == 1
    assert result.errors[0].type == ErrorType.OPERATION_ERROR
    assert result.errors[0].message == f"Source directory does not exist: {source}"
    assert not target.exists()


def test_empty_source_creates_target(tmp_path: Path) -> None:
    source = tmp_path / "source"
    source.mkdir()
    target = tmp_path / "deep" / "nested" / "target"

    result = RulesSynchronizer().sync(source, target)

    assert isinstance(result, SyncSuccess)
    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_copies_only_prefixed_files(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    _write(source / "g-a.mdc", "# A")
    _write(source / "g-b.mdc", "# B")
    _write(source / "other.mdc", "# other")
    _write(source / "xg-c.mdc", "# not global")

    result = RulesSynchronizer().sync(source, target)

    assert isinstance(result, SyncSuccess)
    assert sorted(p.name for p in target.iterdir()) == ["g-a.mdc", "g-b.mdc"]
    assert (target / "g-a.mdc").read_bytes() == (source / "g-a.mdc").read_bytes()
    assert (target / "g-b.mdc").read_bytes() == (source / "g-b.mdc").read_bytes()


def test_overwrites_existing_and_keeps_unrelated(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    _write(source / "g-a.mdc", "new")
    _write(target / "g-a.mdc", "old")
    _write(target / "local.mdc", "local")

    result = RulesSynchronizer().sync(source, target)

    assert result.success is True
    assert (target / "g-a.mdc").read_text(encoding="utf-8") == "new"
    assert (target / "local.mdc").read_text(encoding="utf-8") == "local"


def test_prefixed_directories_are_skipped(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    (source / "g-folder").mkdir(parents=True)
    _write(source / "g-folder" / "g-inner.mdc", "inner")
    _write(source / "g-a.mdc", "a")

    result = RulesSynchronizer().sync(source, target)

    assert result.success is True
    assert sorted(p.name for p in target.iterdir()) == ["g-a.mdc"]


def test_partial_failure_keeps_going(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    _write(source / "g-a.mdc", "a")
    _write(source / "g-b.mdc", "b")
    _write(source / "g-c.mdc", "c")
    (target / "g-b.mdc").mkdir(parents=True)

    result = RulesSynchronizer().sync(source, target)

    assert isinstance(result, SyncFailure)
    assert len(result.errors) == 1
    assert result.errors[0].type == ErrorType.OPERATION_ERROR
    assert result.errors[0].message.startswith("Failed to copy g-b.mdc: ")
    assert (target / "g-a.mdc").read_text(encoding="utf-8") == "a"
    assert (target / "g-c.mdc").read_text(encoding="utf-8") == "c"


def test_errors_are_reported_in_name_order(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    source.mkdir()
    (source / "g-z.mdc").symlink_to(tmp_path / "gone-z")
    (source / "g-m.mdc").symlink_to(tmp_path / "gone-m")
    _write(source / "g-a.mdc", "a")

    result = RulesSynchronizer().sync(source, target)

    assert isinstance(result, SyncFailure)
    messages = [error.message for error in result.errors]
    assert len(messages) == 2
    assert messages[0].startswith("Failed to copy g-m.mdc: ")
    assert messages[1].startswith("Failed to copy g-z.mdc: ")
    assert (target / "g-a.mdc").exists()


def test_symlink_to_file_is_copied_as_content(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    real = tmp_path / "real.mdc"
    _write(real, "linked")
    source.mkdir()
    (source / "g-link.mdc").symlink_to(real)

    result = RulesSynchronizer().sync(source, target)

    assert result.success is True
    copied = target / "g-link.mdc"
    assert not copied.is_symlink()
    assert copied.read_text(encoding="utf-8") == "linked"


def test_target_creation_failure_is_operation_error(tmp_path: Path) -> None:
    source = tmp_path / "source"
    _write(source / "g-a.mdc", "a")
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")

    result = RulesSynchronizer().sync(source, blocker / "target")

    assert isinstance(result, SyncFailure)
    assert len(result.errors) == 1
    assert result.errors[0].type == ErrorType.OPERATION_ERROR


def test_source_is_never_modified(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    _write(source / "g-a.mdc", "a")
    _write(source / "other.mdc", "o")
    before = {p.name: p.read_bytes() for p in source.iterdir()}

    RulesSynchronizer().sync(source, target)

    assert {p.name: p.read_bytes() for p in source.iterdir()} == before


def test_custom_prefix(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "target"
    _write(source / "team-a.mdc", "a")
    _write(source / "g-b.mdc", "b")

    result = RulesSynchronizer(prefix="team-").sync(source, target)

    assert result.success is True
    assert [p.name for p in target.iterdir()] == ["team-a.mdc"]
