"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from scratchpad.utils.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give each test fresh settings unaffected by the caller's environment."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
