"""
M2 recipe module
"""
from .recipe import M2Recipe
from .env import M2Env
from .sync import push, pull

__all__ = ["M2Recipe", "M2Env", "push", "pull"]
