"""
Configuration adapters
"""
from .loader import ConfigLoader
from .context_builder import build_context, resolve_recipe

__all__ = ["ConfigLoader", "build_context", "resolve_recipe"]
