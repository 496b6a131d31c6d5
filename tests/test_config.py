from __future__ import annotations

from pathlib import Path

import pytest

from dropin_manager import ConfigError, ConfigService, DeploymentNotFoundError, ValidationError
from dropin_manager.core.path_resolver import PathResolver
from dropin_manager.models import DeploymentConfig, DeploymentSpec, ManagerConfig

CONFIG = """\
version: "1.0"
debug: true
settings_file: state/settings.yaml
dropin_dir: ${DROPIN_TEST_ROOT}/dropins
deployments:
  - name: example
    source: src/example.py
    filename: example.py
    version: 1.0
    settings_key: example-dropin
  - name: strict
    source: /opt/strict.py
    filename: strict.py
    version: 2.1.0
    strict_on_teardown: true
"""


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("DROPIN_TEST_ROOT", str(tmp_path / "root"))
    path = tmp_path / ".dropin-manager.yaml"
    path.write_text(CONFIG)
    return path


def test_load_config_expands_env_and_coerces_versions(config_file: Path, tmp_path: Path) -> None:
    config = ConfigService(config_file).config

    assert config.debug is True
    assert config.dropin_dir == f"{tmp_path / 'root'}/dropins"
    assert config.get_deployment("example").version == "1.0"
    assert config.get_deployment("strict").strict_on_teardown is True


def test_build_managers_resolves_paths(config_file: Path, tmp_path: Path) -> None:
    managers = dict(ConfigService(config_file).build_managers())

    example = managers["example"]
    assert example.spec.source_path == tmp_path / "src" / "example.py"
    assert example.dest_path == tmp_path / "root" / "dropins" / "example.py"
    assert example.spec.settings_key == "example-dropin"
    assert managers["strict"].spec.source_path == Path("/opt/strict.py")


def test_select_unknown_deployment_raises(config_file: Path) -> None:
    with pytest.raises(DeploymentNotFoundError):
        ConfigService(config_file).build_managers(["nope"])


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigService(tmp_path / "absent.yaml").load_config()


def test_duplicate_deployment_names_rejected() -> None:
    entry = {"name": "a", "source": "s", "filename": "f.py", "version": "1.0.0"}

    with pytest.raises(ConfigError):
        ManagerConfig.from_dict({"deployments": [entry, dict(entry)]})


def test_deployment_requires_fields() -> None:
    with pytest.raises(ConfigError):
        DeploymentConfig.from_dict({"name": "a", "source": "s"})


def test_save_config_round_trip_with_backup(config_file: Path) -> None:
    service = ConfigService(config_file)
    service.config.add_deployment(
        DeploymentConfig(name="extra", source="x.py", filename="x.py", version="0.0.1")
    )
    service.save_config()

    reloaded = ConfigService(config_file).config

    assert [d.name for d in reloaded.deployments] == ["example", "strict", "extra"]
    assert config_file.with_suffix(".yaml.bak").exists()


def test_spec_rejects_path_separators(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        DeploymentSpec(tmp_path / "a.py", tmp_path, "sub/a.py", "1.0.0")


def test_path_resolver_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DROPIN_MANAGER_DIR", raising=False)
    monkeypatch.setenv("DROPIN_MANAGER_CONTENT_DIR", str(tmp_path / "content"))
    assert PathResolver().dropin_dir == tmp_path / "content" / "dropins"

    monkeypatch.setenv("DROPIN_MANAGER_DIR", str(tmp_path / "env-dropins"))
    assert PathResolver().dropin_dir == tmp_path / "env-dropins"

    assert PathResolver(tmp_path / "explicit").dropin_dir == tmp_path / "explicit"


def test_spec_create_uses_resolved_dropin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DROPIN_MANAGER_DIR", str(tmp_path / "dropins"))

    spec = DeploymentSpec.create(tmp_path / "a.py", "a.py", "1.0.0", "key")

    assert spec.dest_path == tmp_path / "dropins" / "a.py"


@pytest.mark.parametrize("version", ["latest", "v-next", "1.0 beta"])
def test_spec_rejects_non_semver_versions(tmp_path: Path, version: str) -> None:
    with pytest.raises(ValidationError, match="Invalid version format"):
        DeploymentSpec(tmp_path / "a.py", tmp_path, "a.py", version)
