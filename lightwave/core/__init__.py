"""
Core Modules.

Configuration, structured logging and the exception taxonomy shared by the CLI.
"""
