"""Tests for connection target validation."""

import os
from pathlib import Path

import pytest

from liteconn.database.path_resolver import (
    find_missing_ancestor,
    resolve_target,
    trial_create,
)
from liteconn.exceptions import ConfigurationError


class TestMemoryTarget:
    """Test the in-memory sentinel."""

    def test_memory_target(self) -> None:
        target = resolve_target(":memory:")

        assert target.in_memory is True
        assert target.read_only is False
        assert target.path == ":memory:"

    def test_memory_target_skips_filesystem(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The filesystem must not be touched for in-memory targets."""

        def fail(*args, **kwargs):
            raise AssertionError("filesystem accessed")

        monkeypatch.setattr(Path, "exists", fail)
        monkeypatch.setattr(Path, "touch", fail)
        monkeypatch.setattr(os, "access", fail)

        assert resolve_target(":memory:").in_memory is True


class TestFileTarget:
    """Test filesystem targets."""

    def test_new_file_is_writable_and_not_left_behind(self, tmp_path: Path) -> None:
        db_file = tmp_path / "new.db"

        target = resolve_target(str(db_file))

        assert target.path == str(db_file)
        assert target.in_memory is False
        assert target.read_only is False
        assert not db_file.exists()

    def test_relative_path_is_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        target = resolve_target("relative.db")

        assert target.path == str(tmp_path / "relative.db")
        assert Path(target.path).is_absolute()

    def test_existing_writable_file(self, tmp_path: Path) -> None:
        db_file = tmp_path / "existing.db"
        db_file.touch()

        target = resolve_target(str(db_file))

        assert target.read_only is False
        assert db_file.exists()

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root can write to read-only files",
    )
    def test_existing_read_only_file(self, tmp_path: Path) -> None:
        db_file = tmp_path / "readonly.db"
        db_file.touch()
        db_file.chmod(0o444)

        try:
            assert resolve_target(str(db_file)).read_only is True
        finally:
            db_file.chmod(0o644)

    def test_missing_parent_names_first_missing_ancestor(self, tmp_path: Path) -> None:
        db_file = tmp_path / "no" / "such" / "parent" / "db.file"

        with pytest.raises(ConfigurationError) as exc_info:
            resolve_target(str(db_file))

        missing = tmp_path / "no"
        assert exc_info.value.path == missing
        assert str(exc_info.value) == f"path to '{db_file}': '{missing}' does not exist"

    def test_missing_direct_parent(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_target(str(tmp_path / "missing" / "db.file"))

        assert exc_info.value.path == tmp_path / "missing"

    def test_trial_create_failure(self, tmp_path: Path) -> None:
        """A parent that is a plain file makes the trial create fail."""
        not_a_dir = tmp_path / "plain_file"
        not_a_dir.write_text("data")

        with pytest.raises(ConfigurationError) as exc_info:
            resolve_target(str(not_a_dir / "db.file"))

        assert isinstance(exc_info.value.__cause__, OSError)
        assert "opening db" in str(exc_info.value)


class TestFindMissingAncestor:
    """Test ancestor lookup."""

    def test_existing_parent(self, tmp_path: Path) -> None:
        assert find_missing_ancestor(tmp_path / "db.file") is None

    def test_deep_missing_chain(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()

        missing = find_missing_ancestor(tmp_path / "a" / "b" / "c" / "db.file")

        assert missing == tmp_path / "a" / "b"


class TestTrialCreate:
    """Test the create-then-delete trial."""

    def test_trial_create_adds_and_removes(self, tmp_path: Path) -> None:
        trial_file = tmp_path / "trial.db"

        with trial_create(trial_file) as created:
            assert created is True
            assert trial_file.exists()

        assert not trial_file.exists()

    def test_trial_create_removes_file_on_error(self, tmp_path: Path) -> None:
        trial_file = tmp_path / "trial.db"

        with pytest.raises(RuntimeError):
            with trial_create(trial_file):
                raise RuntimeError("boom")

        assert not trial_file.exists()

    def test_trial_create_leaves_existing_file(self, tmp_path: Path) -> None:
        trial_file = tmp_path / "trial.db"
        trial_file.write_text("keep")

        with trial_create(trial_file) as created:
            assert created is False

        assert trial_file.read_text() == "keep"
