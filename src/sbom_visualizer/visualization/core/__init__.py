"""
Core visualization components.

This module provides the orchestrator that runs the full pipeline from
component lists to an exported document.
"""

from .unified_visualizer import UnifiedVisualizer

__all__ = ["UnifiedVisualizer"]
