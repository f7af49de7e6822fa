import logging
from pathlib import Path

import orjson
import pytest
from typer.testing import CliRunner

from unixkit.cli import app
from unixkit.domain.models import Settings
from unixkit.errors import ConfigurationError
from unixkit.infrastructure.logging import enable_json_logging, setup_logging
from unixkit.runtime import AppContext, bootstrap, load_config


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yaml")

    assert config.raw == {}
    assert config.settings == Settings()
    assert config.settings.cut.delimiter == "\t"
    assert config.settings.head.lines == 10
    assert config.settings.tail.lines == "10"


def test_config_sections_are_validated(tmp_path: Path) -> None:
    path = tmp_path / "unixkit.yaml"
    path.write_text('cut:\n  delimiter: ";"\ntail:\n  lines: "+3"\nfortune:\n  seed: 4\n', encoding="utf-8")

    settings = load_config(path).settings

    assert settings.cut.delimiter == ";"
    assert settings.tail.lines == "+3"
    assert settings.fortune.seed == 4


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "cut:\n  delimiter: ',,'\n",
        "head:\n  lines: -1\n",
        "tail:\n  lines: soon\n",
        "unknown: 1\n",
        "cut: [unclosed\n",
    ],
)
def test_bad_config_is_a_configuration_error(tmp_path: Path, body: str) -> None:
    path = tmp_path / "unixkit.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_bootstrap_reuses_context() -> None:
    first = bootstrap()

    assert bootstrap() is first
    assert AppContext.get() is first
    assert bootstrap(force=True) is not first


def test_cli_reports_bad_config(runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "unixkit.yaml").write_text("- nope\n", encoding="utf-8")

    result = runner.invoke(app, ["echo", "hi"])

    assert result.exit_code == 1
    assert "config root must be a mapping" in result.stderr


def test_json_logging_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    enable_json_logging()
    try:
        logging.getLogger("unixkit.test").warning("careful %s", "now")
        captured = capsys.readouterr()
    finally:
        setup_logging(json_mode=False, force=True)

    assert captured.out == ""
    record = orjson.loads(captured.err.strip().splitlines()[-1])
    assert record == {"level": "WARNING", "name": "unixkit.test", "message": "careful now"}
