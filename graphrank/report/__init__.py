"""
Report building and rendering.
"""

from .reporter import Reporter

__all__ = ["Reporter"]
