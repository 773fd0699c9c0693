"""Application identity: name, version and the greeting smoke-test.

Both functions are pure and never touch the network, so the front end can
call them to check the bridge is alive.
"""

from __future__ import annotations

import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

APP_NAME = "Angel Requests"
APP_SLUG = "angel-requests"


def _pyproject_path() -> Path:
    # core/app_info.py -> core -> src -> <project_root>
    return Path(__file__).resolve().parents[2] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_app_version() -> str:
    """Return the build's declared version.

    Order:
    1) installed distribution metadata
    2) `pyproject.toml` next to the source tree (running from a checkout)
    """

    try:
        return version(APP_SLUG)
    except PackageNotFoundError:
        pass

    pyproject = _pyproject_path()
    if pyproject.exists():
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
        declared = data.get("project", {}).get("version")
        if isinstance(declared, str) and declared:
            return declared

    return "0.0.0"


def greet(name: str) -> str:
    return f"Hello, {name}! Welcome to {APP_NAME}!"
