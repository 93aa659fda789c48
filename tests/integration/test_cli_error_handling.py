"""CLI error-handling tests for concise diagnostics."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from astra.cli import app


def test_process_reports_malformed_input_with_line_number(tmp_path: Path) -> None:
    """Invalid UTF-8 should fail at the decode stage and name the line."""

    input_path = tmp_path / "latin1.txt"
    input_path.write_bytes("ok\nMontréal\n".encode("latin-1"))

    runner = CliRunner()
    result = runner.invoke(
        app, ["process", "--input", str(input_path), "--output", str(tmp_path / "out.txt")]
    )

    assert result.exit_code == 1
    assert "process failed at stage `decode`" in result.output
    assert "line 2, byte 5" in result.output
    assert "Hint: Re-encode the input as UTF-8 before submitting it." in result.output
    assert "event=failure error_type=InvalidEncodingError" in result.output


def test_process_reports_missing_input_file(tmp_path: Path) -> None:
    """A missing input file should fail at the input stage."""

    runner = CliRunner()
    result = runner.invoke(app, ["process", "--input", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "process failed at stage `input`" in result.output
    assert "Hint: Verify the input file exists and is readable." in result.output


def test_process_reports_missing_config_file() -> None:
    """Process should fail with stage-aware diagnostics when `--config` path is missing."""

    runner = CliRunner()
    result = runner.invoke(app, ["process", "--config", "missing-astra.yaml"])

    assert result.exit_code == 1
    assert "process failed at stage `config`" in result.output
    assert "Config file not found: `missing-astra.yaml`." in result.output


def test_profile_reports_invalid_config_payload(tmp_path: Path) -> None:
    """Profile should fail fast when YAML config schema/values are invalid."""

    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("trim: sometimes\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["profile", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "profile failed at stage `config`" in result.output
    assert "sets profile switch `trim` to `sometimes`" in result.output


def test_profile_reports_invalid_environment(monkeypatch: MonkeyPatch) -> None:
    """Invalid environment switches should be reported as config errors."""

    monkeypatch.setenv("ASTRA_DEDUPLICATE", "perhaps")

    runner = CliRunner()
    result = runner.invoke(app, ["profile"])

    assert result.exit_code == 1
    assert "profile failed at stage `config`" in result.output
    assert "ASTRA_DEDUPLICATE" in result.output


def test_demo_reports_non_stage_error(monkeypatch: MonkeyPatch) -> None:
    """Demo should report unexpected exceptions with exit code 1."""

    def _failing_create(*_: object, **__: object) -> None:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("unexpected session state")

    monkeypatch.setattr("astra.cli.session_create", _failing_create)

    runner = CliRunner()
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 1
    assert "demo failed: unexpected session state" in result.output
