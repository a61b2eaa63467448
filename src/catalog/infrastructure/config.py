"""Runtime configuration, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DATA_DIR = Path(os.getenv("CATALOG_DATA_DIR", str(_PROJECT_ROOT / "data")))
STORAGE_DIR = Path(os.getenv("CATALOG_STORAGE_DIR", str(DATA_DIR / "storage")))

LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "WARNING").upper()
LOG_DIR = Path(os.environ["CATALOG_LOG_DIR"]) if os.getenv("CATALOG_LOG_DIR") else None
