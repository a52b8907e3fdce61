"""CLI adapter to load a JSON register backup into the snapshot store."""

import os
from pathlib import Path

from depreciation_schedules.infrastructure.container import (
    build_save_snapshot_use_case,
    build_settings,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.infrastructure.snapshot_serialization import (
    snapshot_from_json,
)


def main() -> None:
    """Import the file named by ``SNAPSHOT_IMPORT_FILE``."""
    logger = get_app_logger()
    settings = build_settings()
    raw_path = os.getenv("SNAPSHOT_IMPORT_FILE", "").strip()
    if not raw_path:
        logger.warning("SNAPSHOT_IMPORT_FILE is required to import a register.")
        return

    path = Path(raw_path).expanduser()
    try:
        snapshot = snapshot_from_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.error(f"Could not read {path}: {exc}")
        return
    except ValueError as exc:
        logger.error(f"Invalid or corrupted data file {path}: {exc}")
        return

    build_save_snapshot_use_case().execute(settings.snapshot_name, snapshot)
    print(
        f"Imported {len(snapshot.assets)} assets and {len(snapshot.blocks)} "
        f"blocks for FY {snapshot.fiscal_year} as '{settings.snapshot_name}'."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
