"""Dashboard command."""

import click
from fundtrack.domain.entities import ProjectAmount
from fundtrack.domain.reports import ReportingService
from fundtrack.utils.currency import format_currency


def _display_breakdown(title: str, rows: tuple[ProjectAmount, ...]) -> None:
    click.echo(f"\n{title}")
    click.echo("-" * 60)
    if not rows:
        click.echo("  No projects yet.")
        return
    for row in rows:
        click.echo(f"  {row.project_name[:40]:<40} {format_currency(row.amount):>16}")


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show totals and per-project breakdowns across all projects."""
    db = ctx.obj["db"]
    stats = ReportingService(db).dashboard_stats()

    click.echo("\nDashboard")
    click.echo("=" * 60)
    click.echo(f"  {'Total Donations:':<24}{format_currency(stats.total_donations):>16}")
    click.echo(f"  {'Total Expenses:':<24}{format_currency(stats.total_expenses):>16}")
    click.echo(f"  {'Active Projects:':<24}{stats.active_projects:>16}")
    click.echo(f"  {'Completed Projects:':<24}{stats.completed_projects:>16}")

    _display_breakdown("Donations by Project", stats.donations_by_project)
    _display_breakdown("Expenses by Project", stats.expenses_by_project)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
