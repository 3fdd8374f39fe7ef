from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from nav.grid import GridMap, Point

from .schema import MapProfile


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

# Shipped with the package so installed copies find it too.
DEFAULT_MAPS_FILE = Path(__file__).resolve().with_name("maps.yaml")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file and require a mapping at the top."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _select_profile(
    maps_cfg: Dict[str, Any], name: str | None
) -> Tuple[str, Dict[str, Any]]:
    """Return (profile_name, profile_mapping), defaulting to the 'profile' key."""
    profile_name = name or maps_cfg.get("profile")
    if not profile_name:
        raise ValueError("maps.yaml must define a 'profile' key.")
    maps = maps_cfg.get("maps")
    if not isinstance(maps, dict):
        raise ValueError("maps.yaml must define a 'maps' mapping.")
    if profile_name not in maps:
        raise KeyError(f"Map profile '{profile_name}' not found in maps.yaml.")
    raw = maps[profile_name]
    if not isinstance(raw, dict):
        raise ValueError(f"Map profile '{profile_name}' must be a mapping.")
    return profile_name, raw


def _parse_point(raw: Any, field_name: str) -> Point:
    if (
        not isinstance(raw, (list, tuple))
        or len(raw) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw)
    ):
        raise ValueError(f"'{field_name}' must be a pair of integers [x, y], got {raw!r}")
    return Point(raw[0], raw[1])


def _parse_cells(raw: Any) -> List[List[Any]]:
    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise ValueError("'cells' must be a list of rows")
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_map_profile(name: str | None = None, path: Path | None = None) -> MapProfile:
    """
    Main entry point: returns a fully resolved MapProfile.

    name selects a profile from the 'maps' mapping; without it the file's
    'profile' key decides. path defaults to the bundled env/maps.yaml.
    """
    maps_cfg = _load_yaml(path or DEFAULT_MAPS_FILE)
    profile_name, raw = _select_profile(maps_cfg, name)

    for key in ("start", "goal", "cells"):
        if key not in raw:
            raise ValueError(f"Map profile '{profile_name}' is missing '{key}'.")

    grid = GridMap.from_rows(_parse_cells(raw["cells"]))
    start = _parse_point(raw["start"], "start")
    goal = _parse_point(raw["goal"], "goal")

    return MapProfile(name=profile_name, grid=grid, start=start, goal=goal)


def list_map_profiles(path: Path | None = None) -> List[str]:
    """Names of all map profiles in the config file, sorted."""
    maps_cfg = _load_yaml(path or DEFAULT_MAPS_FILE)
    maps = maps_cfg.get("maps") or {}
    if not isinstance(maps, dict):
        raise ValueError("maps.yaml must define a 'maps' mapping.")
    return sorted(maps)
