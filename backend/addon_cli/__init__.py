"""Typer CLI for the stream addon."""
