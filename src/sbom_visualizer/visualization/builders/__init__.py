"""
Document builders for SBOM exports.
"""

from .template_builder import TemplateBuilder

__all__ = ["TemplateBuilder"]
