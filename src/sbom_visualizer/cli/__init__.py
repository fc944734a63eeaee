"""
Command-line interface for SBOM visualizer.
"""

from .main import cli, main

__all__ = ["cli", "main"]
