# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import nav`, `import env`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def maps_file(tmp_path: Path):
    """Write a maps.yaml into tmp_path from a YAML string; returns its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "maps.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
