"""Project metadata read from pyproject.toml."""

from pathlib import Path
import tomllib

from pydantic import BaseModel

_UNAVAILABLE_DESCRIPTION = "Project description not available"
_UNAVAILABLE_VERSION = "Version not available"


class ProjectInfo(BaseModel):
    """Name, version and description of the rtformat distribution."""

    name: str
    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Read project information from the pyproject.toml beside the sources.

    Returns:
        ProjectInfo with placeholder values when the file is missing or
        unreadable.

    """
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"

    if not pyproject_path.exists():
        return ProjectInfo(
            name="rtformat",
            description=_UNAVAILABLE_DESCRIPTION,
            version=_UNAVAILABLE_VERSION,
        )

    try:
        with pyproject_path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            name="rtformat",
            description=f"Error reading project info: {e}",
            version=_UNAVAILABLE_VERSION,
        )

    project = config.get("project", {})
    return ProjectInfo(
        name=project.get("name", "rtformat"),
        description=project.get("description", _UNAVAILABLE_DESCRIPTION),
        version=project.get("version", _UNAVAILABLE_VERSION),
    )
