"""CLI de wztools (Typer + Rich)."""
