"""Test setup for blocks2html."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def editor_export() -> str:
    """A block payload as exported by the editor."""
    return (FIXTURES / "blocks.json").read_text(encoding="utf-8")
