"""
Version information for the AGW SDK.
"""
import importlib.metadata
import pathlib

import tomli

DISTRIBUTION = "agw-sdk"
DEFAULT_VERSION = "0.1.0"
PYPROJECT_PATH = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"


def _pyproject_version(path: pathlib.Path) -> str:
    with path.open("rb") as f:
        return tomli.load(f)["project"]["version"]


def get_version() -> str:
    """Installed distribution version, else the source checkout's, else DEFAULT_VERSION"""
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        pass

    try:
        return _pyproject_version(PYPROJECT_PATH)
    except (OSError, KeyError, tomli.TOMLDecodeError):
        return DEFAULT_VERSION


__version__ = get_version()
