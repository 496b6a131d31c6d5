"""Command line interface for dropin-manager"""

from .main import cli, main

__all__ = ["cli", "main"]
