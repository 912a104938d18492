"""Integration tests for full workflows."""

from fundtrack.cli.main import cli


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_full_workflow(cli_runner, temp_db):
    """Load sample data, review it, then delete a project."""
    result = _invoke(cli_runner, temp_db, "init-sample")
    assert result.exit_code == 0
    assert "Successfully loaded 3 projects, 4 donations and 3 expenses." in result.output

    # Loading twice is refused without --force
    result = _invoke(cli_runner, temp_db, "init-sample")
    assert result.exit_code == 0
    assert "Projects already exist" in result.output

    result = _invoke(cli_runner, temp_db, "dashboard")
    assert result.exit_code == 0
    assert "$1,850" in result.output
    assert "$950" in result.output

    result = _invoke(
        cli_runner, temp_db, "project", "show", "Food Bank Support", "--today", "2023-11-01"
    )
    assert result.exit_code == 0
    assert "3% Complete" in result.output
    assert "$250 of $10,000" in result.output
    assert "29 Days Left" in result.output
    assert "$-200" in result.output
    assert "(loss)" in result.output

    result = _invoke(
        cli_runner,
        temp_db,
        "donation",
        "add",
        "--project",
        "food bank support",
        "--amount",
        "9750",
        "--donor",
        "Community Trust",
        "--method",
        "Bank Transfer",
        "--date",
        "2023-10-15",
    )
    assert result.exit_code == 0

    result = _invoke(cli_runner, temp_db, "dashboard")
    lines = result.output.splitlines()
    completed = next(line for line in lines if "Completed Projects:" in line)
    assert completed.split()[-1] == "1"

    result = _invoke(cli_runner, temp_db, "project", "delete", "Food Bank Support", "--yes")
    assert result.exit_code == 0

    result = _invoke(cli_runner, temp_db, "donation", "list", "--search", "unknown project")
    assert result.exit_code == 0
    assert "Found 2 donation(s)" in result.output
    assert "Jane Smith" in result.output
    assert "Community Trust" in result.output

    result = _invoke(cli_runner, temp_db, "expense", "list")
    assert "Unknown Project" in result.output
    assert "Found 3 expense(s)" in result.output


def test_init_sample_force_on_existing_data(cli_runner, temp_db, sample_project):
    result = _invoke(cli_runner, temp_db, "init-sample", "--force")

    assert result.exit_code == 0
    assert "Warning: Could not create project 'School Supplies for Children'" in result.output
    assert "Loaded 2 projects, 2 donations and 2 expenses with 1 errors." in result.output


def test_help_does_not_touch_database(cli_runner, tmp_path):
    db_path = tmp_path / "never.db"

    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "--help"])

    assert result.exit_code == 0
    assert "dashboard" in result.output
    assert not db_path.exists()
