"""Project information utilities."""

from functools import cache
from pathlib import Path
import tomllib
from typing import Any

from pydantic import BaseModel

UNKNOWN_DESCRIPTION = "Project description not available"
UNKNOWN_VERSION = "Version not available"


class ProjectInfo(BaseModel):
    """Project metadata from pyproject.toml."""

    model_config = {"frozen": True}

    name: str = "parse-fmt-str"
    description: str
    version: str


def _find_pyproject() -> Path:
    # src/parse_fmt_str/project_info.py -> project root
    return Path(__file__).parent.parent.parent / "pyproject.toml"


def _read_project_table(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f).get("project", {})


@cache
def get_project_info() -> ProjectInfo:
    """Get project information from the pyproject.toml file.

    Falls back to placeholder text when the file is missing or unreadable,
    as happens for an installed wheel.

    Returns:
        ProjectInfo: name, description and version of the project.

    """
    pyproject_path = _find_pyproject()
    if not pyproject_path.exists():
        return ProjectInfo(description=UNKNOWN_DESCRIPTION, version=UNKNOWN_VERSION)

    try:
        project = _read_project_table(pyproject_path)
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            description=f"Error reading project info: {e}",
            version=UNKNOWN_VERSION,
        )

    return ProjectInfo(
        name=project.get("name", "parse-fmt-str"),
        description=project.get("description", UNKNOWN_DESCRIPTION),
        version=project.get("version", UNKNOWN_VERSION),
    )
