"""
CLI Commands.

Organized by server resource.
"""

from lightwave.cli.commands.effects import app as effects_app
from lightwave.cli.commands.leds import app as leds_app

__all__ = [
    "effects_app",
    "leds_app",
]
