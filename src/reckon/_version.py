"""Version lookup for reckon: installed metadata first, then the source tree."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    try:
        return _metadata_version("reckon")
    except PackageNotFoundError:
        pass
    # Running from a checkout with src/ on the path
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            return tomllib.load(f).get("project", {}).get("version", "0.0.0")
    return "0.0.0"
