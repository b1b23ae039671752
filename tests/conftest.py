"""Pytest conftest: ensure src is on path for supertrunfo imports; headless matplotlib."""

import os
import sys
from pathlib import Path

os.environ.setdefault("MPLBACKEND", "Agg")

src = Path(__file__).resolve().parent.parent / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))
