"""Single source of truth for the agentdeck version."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"
_VERSION_LINE = re.compile(r'^version\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


def get_version() -> str:
    """Version of a source checkout (pyproject.toml) or of the installed distribution."""
    if _PYPROJECT.exists():
        match = _VERSION_LINE.search(_PYPROJECT.read_text(encoding="utf-8"))
        if match:
            return match.group(1)
    try:
        return _metadata_version("agentdeck")
    except PackageNotFoundError:
        return "0.0.0"
