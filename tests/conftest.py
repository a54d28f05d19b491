import os
import tempfile
from pathlib import Path

# Point the app at a throwaway SQLite file before anything imports db.py
_DB_DIR = Path(tempfile.mkdtemp(prefix="drills-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"

from db import create_schema  # noqa: E402

create_schema()
