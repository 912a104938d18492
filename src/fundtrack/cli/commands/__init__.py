"""CLI commands for fundtrack."""
