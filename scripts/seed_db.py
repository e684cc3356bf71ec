from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.shift_tracker.shift_tracker.container import build_container
from src.shift_tracker.shift_tracker.database.bootstrap import ensure_demo_manager


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    created = ensure_demo_manager(
        container.users_repo,
        container.employees_repo,
        email=getattr(settings, "DEMO_MANAGER_EMAIL", "manager@shiftora.test"),
        password=getattr(settings, "DEMO_MANAGER_PASSWORD", "password123"),
    )
    state = "created" if created else "already present"
    print(f"OK: Demo manager {state} -> {container.conn.config.describe()}")


if __name__ == "__main__":
    main()
