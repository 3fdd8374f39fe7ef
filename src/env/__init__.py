"""
Map profile loading.

Provides:
- load_map_profile / list_map_profiles: read YAML map profiles
- MapProfile: a named grid with its start and goal
"""

from __future__ import annotations

from .loader import DEFAULT_MAPS_FILE, list_map_profiles, load_map_profile
from .schema import MapProfile

__all__ = [
    "DEFAULT_MAPS_FILE",
    "list_map_profiles",
    "load_map_profile",
    "MapProfile",
]
