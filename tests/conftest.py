import sys
from collections.abc import Callable, Iterable
from unittest.mock import MagicMock

import pytest

from proctime.models import RunResult, RunSpec


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in [
        "PROCTIME_LOG_LEVEL",
        "PROCTIME_CAPTURE_STDOUT",
        "PROCTIME_STDERR_MAX_CHARS",
        "PROCTIME_DOTENV_PATH",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def python_spec() -> Callable[..., RunSpec]:
    """Build a RunSpec that runs a snippet with the current interpreter."""

    def _make(code: str, *args: str) -> RunSpec:
        return RunSpec(path=sys.executable, args=("-c", code, *args))

    return _make


@pytest.fixture
def fake_invoker() -> Callable[[Iterable[RunResult]], MagicMock]:
    """Invoker stand-in that returns the given results in order."""

    def _make(results: Iterable[RunResult]) -> MagicMock:
        return MagicMock(side_effect=list(results))

    return _make
