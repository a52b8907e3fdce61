"""CLI adapter to close the saved register and open the next year."""

from depreciation_schedules.infrastructure.container import (
    build_load_snapshot_use_case,
    build_roll_forward_use_case,
    build_save_snapshot_use_case,
    build_settings,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Roll the configured snapshot forward and save it in place."""
    logger = get_app_logger()
    settings = build_settings()
    try:
        snapshot = build_load_snapshot_use_case().execute(
            settings.snapshot_name
        )
    except LookupError:
        print(f"No saved register named '{settings.snapshot_name}'.")
        return
    except ValueError as exc:
        logger.error(f"Could not read snapshot: {exc}")
        return

    rolled = build_roll_forward_use_case().execute(snapshot)
    build_save_snapshot_use_case().execute(settings.snapshot_name, rolled)
    print(
        f"Register '{settings.snapshot_name}' moved from FY "
        f"{snapshot.fiscal_year} to FY {rolled.fiscal_year}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
