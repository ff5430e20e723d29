"""
CLI Client Module.

Command-line client built with Typer for controlling a LightWave LED server.

Architecture:
- CLI is a thin presentation layer
- All effect and LED logic lives on the server
- CLI calls the server via HTTP (httpx), one request per command
- Sends X-Client-ID: lightwave-cli header for log routing

Usage:
    lightwave --help
    lightwave effects list
    lightwave leds brightness 0.5
    lightwave status
"""
