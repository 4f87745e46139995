"""
Recipe domain module
"""
from typing import List

from ...core.constants import SUPPORTED_RECIPES
from ...core.context import Context
from ...core.exceptions import ConfigError
from ..tasks.models import Task
from . import requests
from .m2 import M2Recipe

_RECIPES = {
    "M2": M2Recipe,
}


def get_recipe(name: str) -> M2Recipe:
    """
    Look up a recipe by name.
    
    Raises:
        ConfigError: If the recipe is unknown
    """
    try:
        return _RECIPES[name]()
    except KeyError:
        raise ConfigError(
            f"Unknown recipe `{name}`, expected one of: {', '.join(SUPPORTED_RECIPES)}"
        ) from None


def resolve(ctx: Context, request: requests.OperationRequest, recipe: str = "M2") -> List[Task]:
    """Plan the tasks for a request"""
    return get_recipe(recipe).resolve(ctx, request)


__all__ = ["M2Recipe", "get_recipe", "resolve", "requests"]
