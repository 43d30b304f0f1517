# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

# headless plotting for viz tests
matplotlib.use("Agg")

# Ensure the project root is on sys.path for imports like `import grid`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
