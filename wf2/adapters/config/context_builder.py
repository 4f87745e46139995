"""
Build the project Context from merged configuration
"""
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from ...core.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DOMAINS,
    DEFAULT_PHP_VERSION,
    DEFAULT_RECIPE,
    SUPPORTED_RECIPES,
)
from ...core.context import Context, Term
from ...core.exceptions import ConfigError


def resolve_recipe(cfg: Dict[str, Any]) -> str:
    """Validate and return the configured recipe name"""
    recipe = str(cfg.get("recipe", DEFAULT_RECIPE))
    if recipe not in SUPPORTED_RECIPES:
        raise ConfigError(
            f"Unknown recipe `{recipe}`, expected one of: {', '.join(SUPPORTED_RECIPES)}"
        )
    return recipe


def build_context(
    cfg: Dict[str, Any],
    cwd: Path,
    term: Optional[Term] = None,
    pv: Optional[str] = None,
) -> Context:
    """
    Create the immutable Context for one invocation.
    
    Args:
        cfg: Merged configuration dictionary
        cwd: Working directory (host root)
        term: Terminal size, defaults to 80x30
        pv: Path to `pv`; looked up on PATH when not configured
    
    Raises:
        ConfigError: If a configured value has the wrong type
    """
    cwd = Path(cwd).resolve()
    name = cfg.get("name") or cwd.name
    if not name:
        raise ConfigError(f"Cannot derive a project name from `{cwd}`, set `name` in {CONFIG_FILE_NAME}")
    
    domains = cfg.get("domains", DEFAULT_DOMAINS)
    if isinstance(domains, str):
        domains = [domains]
    if not isinstance(domains, list):
        raise ConfigError("`domains` must be a list of strings")
    
    php_version = str(cfg.get("php_version", DEFAULT_PHP_VERSION))
    
    configured_pv = cfg.get("pv")
    if configured_pv is False:
        pv_path = None
    else:
        pv_path = configured_pv or pv or shutil.which("pv")
    
    return Context(
        name=str(name),
        cwd=cwd,
        term=term or Term(),
        pv=Path(pv_path) if pv_path else None,
        domains=tuple(domains),
        php_version=php_version,
    )
