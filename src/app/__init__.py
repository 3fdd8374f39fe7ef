# src/app/__init__.py
"""
Application wiring for the path finder.

Exposes:
- configure_logging: one-shot stdout logging setup for entrypoints
"""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
