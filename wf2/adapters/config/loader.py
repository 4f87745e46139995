"""
Configuration loader: WF2_ environment variables override wf2.toml
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import ENV_PREFIX
from ...core.exceptions import ConfigError


class ConfigLoader:
    """Configuration loader with priority support"""
    
    # Variable names without the WF2_ prefix
    env_mappings = {
        "NAME": "name",
        "RECIPE": "recipe",
        "PHP_VERSION": "php_version",
        "DOMAINS": "domains",
        "PV": "pv",
    }
    
    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._env_prefix = ENV_PREFIX
        self._environ = os.environ if environ is None else environ
    
    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        
        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse TOML configuration {path}: {e}") from e
    
    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}
        
        for env_key, config_key in self.env_mappings.items():
            value = self._environ.get(self._env_prefix + env_key)
            if not value:
                continue
            if config_key == "domains":
                config[config_key] = [d.strip() for d in value.split(",") if d.strip()]
            elif config_key in ("php_version", "name"):
                # "7.2" must stay a string
                config[config_key] = value
            else:
                config[config_key] = self._convert_value(value)
        
        return config
    
    def _convert_value(self, value: str) -> Any:
        """Convert string value to appropriate type"""
        if value.lower() in ("true", "yes", "1"):
            return True
        if value.lower() in ("false", "no", "0"):
            return False
        
        try:
            return int(value)
        except ValueError:
            pass
        
        return value
    
    def load(self, toml_path: Optional[Path] = None) -> Dict[str, Any]:
        """
        Load the flat configuration: TOML first, environment on top.
        
        Args:
            toml_path: Path to TOML configuration file; skipped when missing
        
        Returns:
            Merged configuration dictionary, missing keys are left to defaults
        """
        config: Dict[str, Any] = {}
        
        if toml_path and toml_path.exists():
            config.update(self.load_toml(toml_path))
        
        config.update(self.load_env())
        return config
