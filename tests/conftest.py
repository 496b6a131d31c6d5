from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pytest

from dropin_manager import DeploymentSpec, DropinManager, MemorySettingsStore, NoticeService
from dropin_manager.storage import LocalFilesystem


class RecordingFilesystem(LocalFilesystem):
    """Local filesystem that records calls and can be told to fail"""

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[str] = []
        self.fail_mkdir = False
        self.fail_copy = False
        self.fail_delete = False
        self.unwritable: set[str] = set()

    def mkdir(self, path) -> bool:
        self.calls.append("mkdir")
        return False if self.fail_mkdir else super().mkdir(path)

    def copy(self, source, destination) -> bool:
        self.calls.append("copy")
        return False if self.fail_copy else super().copy(source, destination)

    def delete(self, path) -> bool:
        self.calls.append("delete")
        return False if self.fail_delete else super().delete(path)

    def is_writable(self, path) -> bool:
        if str(path) in self.unwritable:
            return False
        return super().is_writable(path)


class FlakySettingsStore(MemorySettingsStore):
    """Memory store whose writes can be rejected"""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        super().__init__(initial)
        self.reject_writes = False
        self.writes = 0

    def set(self, name: str, value: Mapping[str, Any]) -> bool:
        self.writes += 1
        if self.reject_writes:
            return False
        return super().set(name, value)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "src" / "example-dropin.py"
    path.parent.mkdir()
    path.write_text("# drop-in v1\n")
    return path


@pytest.fixture
def dropin_dir(tmp_path: Path) -> Path:
    return tmp_path / "content" / "dropins"


@pytest.fixture
def filesystem() -> RecordingFilesystem:
    return RecordingFilesystem()


@pytest.fixture
def store() -> FlakySettingsStore:
    return FlakySettingsStore()


@pytest.fixture
def make_manager(source_file: Path, dropin_dir: Path, filesystem: RecordingFilesystem, store: FlakySettingsStore):
    def factory(version: str = "0.1.0", **overrides: Any) -> DropinManager:
        spec_fields: Dict[str, Any] = {
            "source_path": source_file,
            "dest_dir": dropin_dir,
            "dest_filename": "example-dropin.py",
            "version": version,
            "settings_key": "example-dropin",
            "strict_on_teardown": False,
        }
        for key in list(overrides):
            if key in spec_fields:
                spec_fields[key] = overrides.pop(key)

        kwargs: Dict[str, Any] = {
            "filesystem": filesystem,
            "settings": store,
            "notices": NoticeService(debug=True),
        }
        kwargs.update(overrides)
        return DropinManager(DeploymentSpec(**spec_fields), **kwargs)

    return factory
