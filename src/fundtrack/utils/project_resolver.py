"""Utility for resolving project names to IDs."""

from fundtrack.domain.errors import NotFoundError
from fundtrack.domain.project import ProjectService


def resolve_project(project_service: ProjectService, project: str | int) -> int:
    """Resolve project name or ID to project ID.

    Numeric input is treated as an ID first. If no project has that ID,
    it is tried as a name, so a project called "2024" stays reachable.

    Args:
        project_service: ProjectService instance
        project: Project name (str) or ID (int or string representation of int)

    Returns:
        Project ID

    Raises:
        NotFoundError: If project is not found
    """
    if isinstance(project, int):
        if project_service.get_project(project) is None:
            raise NotFoundError(f"Project ID {project} not found")
        return project

    text = project.strip()
    if text.isdigit() and project_service.get_project(int(text)) is not None:
        return int(text)

    for candidate in project_service.list_projects():
        if candidate.name == text:
            return candidate.id

    # Fall back to a case-insensitive match when it is unambiguous
    matches = [p for p in project_service.list_projects() if p.name.lower() == text.lower()]
    if len(matches) == 1:
        return matches[0].id

    raise NotFoundError(f"Project '{project}' not found")
