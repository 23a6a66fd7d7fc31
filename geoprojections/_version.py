"""
Exposes the version of geoprojections
"""
from __future__ import annotations

__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> str | None:
    """Source-tree fallback when the distribution metadata isn't installed."""
    if not _VERSION_FILE.is_file():
        return None

    return _VERSION_FILE.read_text(encoding='utf-8').strip() or None


try:
    __version__ = version('geoprojections')
except PackageNotFoundError:
    __version__ = _read_version_file()
