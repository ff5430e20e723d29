"""
LightWave CLI.

- core/: Configuration, logging, exceptions
- cli/: Typer command-line client for the LightWave LED server
"""

__version__ = "0.1.0"
