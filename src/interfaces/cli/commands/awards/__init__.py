"""Award list CLI commands."""

from src.interfaces.cli.commands.awards.intervals import intervals
from src.interfaces.cli.commands.awards.load_csv import load_csv


__all__ = ["intervals", "load_csv"]
