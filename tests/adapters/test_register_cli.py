"""Tests for the import and roll-forward CLI adapters."""

from decimal import Decimal
from unittest.mock import MagicMock

from depreciation_schedules.adapters import import_snapshot_cli, roll_forward_cli
from depreciation_schedules.domain.models import (
    CompaniesActAsset,
    RegisterSnapshot,
)
from depreciation_schedules.infrastructure.settings import DepreciationSettings
from depreciation_schedules.infrastructure.snapshot_serialization import (
    snapshot_to_json,
)


def _snapshot() -> RegisterSnapshot:
    return RegisterSnapshot(
        fiscal_year="2024-25",
        assets=(
            CompaniesActAsset(
                id="a1",
                name="Lathe",
                asset_type="general_machinery",
                opening_gross_block=Decimal("100000"),
            ),
        ),
    )


def test_import_saves_backup_under_snapshot_name(
    monkeypatch, capsys, tmp_path
):
    """A valid backup file is saved under the configured name."""
    backup = tmp_path / "backup.json"
    backup.write_text(snapshot_to_json(_snapshot()), encoding="utf-8")
    save_use_case = MagicMock()
    monkeypatch.setenv("SNAPSHOT_IMPORT_FILE", str(backup))
    monkeypatch.setattr(import_snapshot_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        import_snapshot_cli,
        "build_settings",
        lambda: DepreciationSettings(snapshot_name="main"),
    )
    monkeypatch.setattr(
        import_snapshot_cli,
        "build_save_snapshot_use_case",
        lambda: save_use_case,
    )

    import_snapshot_cli.main()

    name, snapshot = save_use_case.execute.call_args.args
    assert name == "main"
    assert snapshot == _snapshot()
    assert "Imported 1 assets and 0 blocks" in capsys.readouterr().out


def test_import_requires_file_variable(monkeypatch):
    """Without SNAPSHOT_IMPORT_FILE nothing is saved."""
    fake_logger = MagicMock()
    save_use_case = MagicMock()
    monkeypatch.delenv("SNAPSHOT_IMPORT_FILE", raising=False)
    monkeypatch.setattr(
        import_snapshot_cli, "get_app_logger", lambda: fake_logger
    )
    monkeypatch.setattr(
        import_snapshot_cli, "build_settings", DepreciationSettings
    )
    monkeypatch.setattr(
        import_snapshot_cli,
        "build_save_snapshot_use_case",
        lambda: save_use_case,
    )

    import_snapshot_cli.main()

    fake_logger.warning.assert_called_once()
    save_use_case.execute.assert_not_called()


def test_import_rejects_corrupted_file(monkeypatch, tmp_path):
    """Invalid JSON is logged and nothing is saved."""
    backup = tmp_path / "backup.json"
    backup.write_text("{oops", encoding="utf-8")
    fake_logger = MagicMock()
    save_use_case = MagicMock()
    monkeypatch.setenv("SNAPSHOT_IMPORT_FILE", str(backup))
    monkeypatch.setattr(
        import_snapshot_cli, "get_app_logger", lambda: fake_logger
    )
    monkeypatch.setattr(
        import_snapshot_cli, "build_settings", DepreciationSettings
    )
    monkeypatch.setattr(
        import_snapshot_cli,
        "build_save_snapshot_use_case",
        lambda: save_use_case,
    )

    import_snapshot_cli.main()

    fake_logger.error.assert_called_once()
    save_use_case.execute.assert_not_called()


def test_roll_forward_saves_next_year(monkeypatch, capsys):
    """The roll-forward CLI saves the rolled register in place."""
    load_use_case = MagicMock()
    load_use_case.execute.return_value = _snapshot()
    rolled = RegisterSnapshot(fiscal_year="2025-26")
    roll_use_case = MagicMock()
    roll_use_case.execute.return_value = rolled
    save_use_case = MagicMock()
    monkeypatch.setattr(roll_forward_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        roll_forward_cli,
        "build_settings",
        lambda: DepreciationSettings(snapshot_name="main"),
    )
    monkeypatch.setattr(
        roll_forward_cli, "build_load_snapshot_use_case", lambda: load_use_case
    )
    monkeypatch.setattr(
        roll_forward_cli, "build_roll_forward_use_case", lambda: roll_use_case
    )
    monkeypatch.setattr(
        roll_forward_cli, "build_save_snapshot_use_case", lambda: save_use_case
    )

    roll_forward_cli.main()

    save_use_case.execute.assert_called_once_with("main", rolled)
    assert "from FY 2024-25 to FY 2025-26" in capsys.readouterr().out


def test_roll_forward_reports_missing_snapshot(monkeypatch, capsys):
    """Missing registers are reported and nothing is saved."""
    load_use_case = MagicMock()
    load_use_case.execute.side_effect = LookupError("main")
    save_use_case = MagicMock()
    monkeypatch.setattr(roll_forward_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(roll_forward_cli, "build_settings", DepreciationSettings)
    monkeypatch.setattr(
        roll_forward_cli, "build_load_snapshot_use_case", lambda: load_use_case
    )
    monkeypatch.setattr(
        roll_forward_cli, "build_save_snapshot_use_case", lambda: save_use_case
    )

    roll_forward_cli.main()

    assert "No saved register named 'default'" in capsys.readouterr().out
    save_use_case.execute.assert_not_called()
