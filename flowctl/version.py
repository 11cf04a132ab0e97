"""
Version management for flowctl.

The version is read from pyproject.toml, the single source of truth, when
running from a source checkout, and from the installed distribution's
metadata otherwise.
"""

from importlib import metadata
from pathlib import Path

import tomli

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"

FALLBACK_VERSION = "0.0.0"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        Version string, or the installed distribution's version when the
        checkout's pyproject.toml is unavailable
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            return tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        try:
            return metadata.version("flowctl")
        except metadata.PackageNotFoundError:
            return FALLBACK_VERSION


__version__ = get_version_from_pyproject()


def get_version() -> str:
    """Get the current version of the flowctl package."""
    return __version__
