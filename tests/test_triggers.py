from __future__ import annotations

from pathlib import Path

from dropin_manager import TriggerRegistry, register_manager
from dropin_manager.constants import TriggerEvent


def test_registry_runs_callbacks_by_priority_then_order() -> None:
    registry = TriggerRegistry()
    calls = []
    registry.register("admin_init", lambda **_: calls.append("late"), priority=20)
    registry.register("admin_init", lambda **_: calls.append("first"), priority=1)
    registry.register("admin_init", lambda **_: calls.append("second"), priority=1)

    registry.fire(TriggerEvent.ADMIN_INIT)

    assert calls == ["first", "second", "late"]


def test_version_check_only_runs_on_configured_screen(make_manager, dropin_dir: Path) -> None:
    registry = TriggerRegistry()
    manager = make_manager()
    register_manager(registry, manager)

    registry.fire("admin_init", screen_name="dashboard")
    assert not (dropin_dir / "example-dropin.py").exists()

    results = registry.fire("admin_init", screen_name="plugins")
    assert results[0] is True
    assert results[1].is_success
    assert (dropin_dir / "example-dropin.py").exists()


def test_failed_version_check_queues_notice(make_manager, filesystem) -> None:
    registry = TriggerRegistry()
    manager = make_manager()
    register_manager(registry, manager)
    filesystem.fail_copy = True

    registry.fire("admin_init", screen_name="plugins")

    assert len(manager.notices.notices) == 1
    assert "not writable" in manager.notices.notices[0].message


def test_admin_notice_when_update_pending_and_unwritable(make_manager, filesystem, dropin_dir: Path) -> None:
    dropin_dir.mkdir(parents=True)
    filesystem.unwritable.add(str(dropin_dir))
    registry = TriggerRegistry()
    manager = make_manager()
    register_manager(registry, manager)

    registry.fire("admin_notices")

    assert [n.directory for n in manager.notices.notices] == [str(dropin_dir)]


def test_activate_and_deactivate_events(make_manager, store, dropin_dir: Path) -> None:
    registry = TriggerRegistry()
    register_manager(registry, make_manager())

    registry.fire("activate")
    assert store.get("example-dropin") == {"installed_version": "0.1.0"}

    registry.fire("deactivate")
    assert not (dropin_dir / "example-dropin.py").exists()
    assert store.get("example-dropin") == {}
