"""
Configuration management for valuekit.

Centralizes sampling budgets, locale and seed selection instead of
scattering magic numbers through the generators.
"""

from .settings import GenerationConfig

__all__ = ["GenerationConfig"]
