from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from unixkit.runtime import AppContext


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UNIXKIT_CONFIG", str(tmp_path / "unixkit.yaml"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    AppContext.reset()
    yield tmp_path
    AppContext.reset()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
