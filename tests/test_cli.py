from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from dropin_manager.cli.main import cli


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "example.py").write_text("# example drop-in\n")
    config = {
        "settings_file": "settings.yaml",
        "dropin_dir": "content/dropins",
        "deployments": [
            {
                "name": "example",
                "source": "src/example.py",
                "filename": "example.py",
                "version": "0.1.0",
                "settings_key": "example-dropin",
            },
        ],
    }
    (tmp_path / ".dropin-manager.yaml").write_text(yaml.safe_dump(config))
    return tmp_path


def invoke(project: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["--config", str(project / ".dropin-manager.yaml"), *args])


def read_settings(project: Path) -> dict:
    return yaml.safe_load((project / "settings.yaml").read_text())


def test_check_installs_then_skips(project: Path) -> None:
    first = invoke(project, "check")

    assert first.exit_code == 0, first.output
    assert (project / "content" / "dropins" / "example.py").exists()
    assert read_settings(project) == {"example-dropin": {"installed_version": "0.1.0"}}

    second = invoke(project, "check", "--name", "example")

    assert second.exit_code == 0
    assert "is current" in second.output


def test_activate_then_deactivate(project: Path) -> None:
    assert invoke(project, "activate").exit_code == 0

    result = invoke(project, "deactivate")

    assert result.exit_code == 0
    assert not (project / "content" / "dropins" / "example.py").exists()
    assert read_settings(project) == {"example-dropin": {}}


def test_install_failure_exits_nonzero(project: Path) -> None:
    (project / "src" / "example.py").unlink()

    result = invoke(project, "install")

    assert result.exit_code == 1
    assert "DM002" in result.output


def test_unknown_deployment_exits_nonzero(project: Path) -> None:
    result = invoke(project, "remove", "--name", "missing")

    assert result.exit_code == 1
    assert "Deployment not found: missing" in result.output


def test_status_json(project: Path) -> None:
    invoke(project, "install")

    result = invoke(project, "status", "--json")

    assert result.exit_code == 0
    [status] = json.loads(result.output)
    assert status["name"] == "example"
    assert status["installed"] is True
    assert status["recorded_version"] == "0.1.0"
    assert status["update_required"] is False


def test_install_json_reports_failure_codes(project: Path) -> None:
    (project / "src" / "example.py").unlink()

    result = invoke(project, "install", "--json")

    assert result.exit_code == 1
    [record] = json.loads(result.stdout)
    assert record["name"] == "example"
    assert record["operation"] == "install"
    assert record["status"] == "failed"
    assert record["kind"] == "not_writable"
    assert record["error_code"] == "DM002"


def test_check_json_reports_success_then_skip(project: Path) -> None:
    [first] = json.loads(invoke(project, "check", "--json").stdout)
    [second] = json.loads(invoke(project, "check", "--json").stdout)

    assert first["status"] == "success"
    assert "error_code" not in first
    assert second["status"] == "skipped"


def test_activate_failure_is_logged_once(project: Path, caplog) -> None:
    (project / "src" / "example.py").unlink()

    with caplog.at_level(logging.DEBUG):
        result = invoke(project, "-d", "activate")

    assert result.exit_code == 1
    notice_logs = [r for r in caplog.records if r.name == "dropin_manager.services.notice_service"]
    assert len(notice_logs) == 1
