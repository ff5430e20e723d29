#!/usr/bin/env python3
"""
LightWave CLI.

Entry point for running the client from a checkout without installing it.

Usage:
    python cli.py --help
    python cli.py effects list
    python cli.py --base-url http://lights.local:8000 status
"""

from lightwave.cli.app import run

if __name__ == "__main__":
    run()
