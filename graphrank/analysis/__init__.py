"""
Structural graph analysis.
"""

from .components import Component, WeakComponentAnalyzer, weak_components

__all__ = ["Component", "WeakComponentAnalyzer", "weak_components"]
