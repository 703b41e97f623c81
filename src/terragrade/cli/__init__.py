"""
CLI commands for terragrade.
"""

from terragrade.cli.analyze import analyze_command
from terragrade.cli.main import build_parser, main

__all__ = ["analyze_command", "build_parser", "main"]
