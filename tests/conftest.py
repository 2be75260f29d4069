"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`weekmenu` package (e.g., `from weekmenu.store import MenuStore`) without
requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from weekmenu.domain.seed_data import initial_state  # noqa: E402


@pytest.fixture
def state():
    """A fresh copy of the built-in catalog and week."""

    return initial_state()
