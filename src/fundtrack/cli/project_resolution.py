"""CLI helpers for project resolution and error handling."""

from __future__ import annotations

import click
from fundtrack.cli.error_handling import handle_domain_error
from fundtrack.domain.project import ProjectService
from fundtrack.utils.project_resolver import resolve_project


def resolve_project_or_exit(
    ctx: click.Context, project_service: ProjectService, project: str | int
) -> int:
    """Resolve project name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_project(project_service, project)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
