"""Package metadata and naming constants - centralized from .project.yml."""

from pathlib import Path
from typing import Any, Dict

import yaml

_PROJECT_FILE = Path(__file__).parent.parent / ".project.yml"

_FALLBACK_METADATA: Dict[str, Any] = {
    "project": {
        "name": "design-patterns-catalogue",
        "short_name": "patterns",
        "version": "1.0.0",
        "description": "Catalogue of classic object-oriented design pattern demonstrations",
    },
}


def _load_metadata() -> Dict[str, Any]:
    """Load .project.yml; installed copies without it use the bundled values."""
    if not _PROJECT_FILE.exists():
        return _FALLBACK_METADATA
    with open(_PROJECT_FILE, "r") as f:
        return yaml.safe_load(f) or _FALLBACK_METADATA


_metadata = _load_metadata()

# Single source of truth
PACKAGE_NAME = _metadata["project"]["name"]
__version__ = str(_metadata["project"]["version"])
DESCRIPTION = _metadata["project"]["description"]

