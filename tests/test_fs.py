"""Tests for foreman.fs filesystem helpers."""

import errno
import os
import threading
from unittest.mock import patch

import pytest

from foreman.errors import ForemanIOError
from foreman.fs import create_dir_all, write_if_not_found


class TestCreateDirAll:
    def test_creates_ancestors(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        create_dir_all(target)
        assert target.is_dir()

    def test_existing_is_noop(self, tmp_path):
        create_dir_all(tmp_path)
        assert tmp_path.is_dir()

    def test_file_in_the_way(self, tmp_path):
        target = tmp_path / "blocked"
        target.write_text("not a dir")
        with pytest.raises(ForemanIOError) as exc_info:
            create_dir_all(target)
        assert exc_info.value.path == target
        assert isinstance(exc_info.value.__cause__, OSError)
        assert str(target) in str(exc_info.value)


class TestWriteIfNotFound:
    def test_writes_new_file(self, tmp_path):
        target = tmp_path / "new.toml"
        assert write_if_not_found(target, "a = 1\n") is True
        assert target.read_text(encoding="utf-8") == "a = 1\n"

    def test_keeps_existing_content(self, tmp_path):
        target = tmp_path / "existing.toml"
        target.write_text("mine = true\n", encoding="utf-8")
        assert write_if_not_found(target, "default = true\n") is False
        assert target.read_text(encoding="utf-8") == "mine = true\n"

    def test_missing_parent(self, tmp_path):
        target = tmp_path / "nope" / "file.toml"
        with pytest.raises(ForemanIOError) as exc_info:
            write_if_not_found(target, "x")
        assert exc_info.value.path == target
        assert isinstance(exc_info.value.source, FileNotFoundError)

    def test_missing_parent_leaves_no_temp_files(self, tmp_path):
        with pytest.raises(ForemanIOError):
            write_if_not_found(tmp_path / "nope" / "file.toml", "x")
        assert list(tmp_path.iterdir()) == []


class _DiskFull:
    """File wrapper whose write stores a prefix of the text, then fails."""

    def __init__(self, fh):
        self._fh = fh

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._fh.close()

    def write(self, text):
        self._fh.write(text[:10])
        self._fh.flush()
        raise OSError(errno.ENOSPC, "No space left on device")


class TestInterruptedWrite:
    def _fail_writes(self):
        real_fdopen = os.fdopen
        return patch(
            "foreman.fs.os.fdopen",
            side_effect=lambda fd, *args, **kwargs: _DiskFull(real_fdopen(fd, *args, **kwargs)),
        )

    def test_partial_write_leaves_no_file(self, tmp_path):
        target = tmp_path / "foreman.toml"
        with self._fail_writes():
            with pytest.raises(ForemanIOError) as exc_info:
                write_if_not_found(target, "[tools]\nrojo = 1\n")
        assert exc_info.value.source.errno == errno.ENOSPC
        assert not target.exists()
        assert list(tmp_path.iterdir()) == []

    def test_retry_after_partial_write_seeds_full_content(self, tmp_path):
        target = tmp_path / "foreman.toml"
        with self._fail_writes():
            with pytest.raises(ForemanIOError):
                write_if_not_found(target, "[tools]\nrojo = 1\n")
        assert write_if_not_found(target, "[tools]\nrojo = 1\n") is True
        assert target.read_text(encoding="utf-8") == "[tools]\nrojo = 1\n"


class TestConcurrentSeeding:
    def test_lost_race_keeps_winner_content(self, tmp_path):
        target = tmp_path / "auth.toml"
        real_link = os.link

        def publish_first(src, dst):
            # another process finishes seeding after our existence check
            target.write_text('github = "winner"\n', encoding="utf-8")
            real_link(src, dst)

        with patch("foreman.fs.os.link", side_effect=publish_first):
            assert write_if_not_found(target, "# default\n") is False

        assert target.read_text(encoding="utf-8") == 'github = "winner"\n'
        assert sorted(p.name for p in tmp_path.iterdir()) == ["auth.toml"]

    def test_parallel_writers_produce_one_complete_file(self, tmp_path):
        target = tmp_path / "foreman.toml"
        payloads = [f"# writer {i}\n" + "x" * 4096 for i in range(8)]
        results: list[bool] = []
        barrier = threading.Barrier(len(payloads))

        def seed(text):
            barrier.wait()
            results.append(write_if_not_found(target, text))

        threads = [threading.Thread(target=seed, args=(text,)) for text in payloads]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1
        assert target.read_text(encoding="utf-8") in payloads
        assert sorted(p.name for p in tmp_path.iterdir()) == ["foreman.toml"]
