"""Pytest configuration.

Sources live in the `src.*` namespace at the repository root. This conftest puts the root on
`sys.path` so `pytest` works from a plain checkout as well as an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
