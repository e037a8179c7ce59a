from __future__ import annotations

import sys

from attendance_tracker.database.bootstrap import initialize_database
from attendance_tracker.logging_config import configure_logging
from attendance_tracker.main import load_settings


def main() -> int:
    settings = load_settings()
    configure_logging(settings)
    db_config = dict(settings.DB_CONFIG)

    result = initialize_database(db_config)
    if not result.ok:
        print(f"FAILED: {result.error}", file=sys.stderr)
        return 1

    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{result.database} "
        f"(tables={len(result.tables)})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
