# Pytest fixtures for environment and .env file setup.
import os

import pytest

from envfile import MemoryEnviron


# Keep host ENVFILE_* settings from leaking into tests.
@pytest.fixture(autouse=True)
def clear_loader_settings(monkeypatch):
    for name in ("ENVFILE_PATH", "ENVFILE_ENCODING", "ENVFILE_OVERWRITE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def memory_environ():
    return MemoryEnviron()


# Remove the given keys from os.environ before and after the test.
@pytest.fixture()
def os_keys():
    keys = ["ENVFILE_TEST_A", "ENVFILE_TEST_C", "ENVFILE_TEST_EMPTY"]
    for key in keys:
        os.environ.pop(key, None)
    yield keys
    for key in keys:
        os.environ.pop(key, None)


# Write a .env file into a temp directory and make it the working directory.
@pytest.fixture()
def env_file(tmp_path, monkeypatch):
    def _write(content: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    monkeypatch.chdir(tmp_path)
    return _write


# Stream that yields some lines and then fails like a broken device.
class FailingStream:
    def __init__(self, lines, fail_after: int):
        self._lines = list(lines)
        self._fail_after = fail_after

    def __iter__(self):
        for line in self._lines[: self._fail_after]:
            yield line
        raise OSError("stream went away")


@pytest.fixture()
def failing_stream():
    return FailingStream
