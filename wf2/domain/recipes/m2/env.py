"""
Environment variables derived from the project context
"""
import os
from dataclasses import dataclass
from typing import Dict

from ....core.constants import DB_NAME, DB_PASS, DB_USER, SUPPORTED_PHP_VERSIONS
from ....core.context import Context
from ....core.exceptions import EnvError

PHP_IMAGE_72 = "wearejh/php:7.2-m2"
PHP_IMAGE_71 = "wearejh/php:7.1-m2"


@dataclass(frozen=True)
class M2Env:
    """Values written to the compose `.env` file"""
    values: Dict[str, str]
    
    @classmethod
    def from_ctx(cls, ctx: Context) -> "M2Env":
        """
        Compute the environment for a context.
        
        Raises:
            EnvError: If required configuration is missing or invalid
        """
        if not ctx.domains:
            raise EnvError("At least one domain is required (set `domains` in wf2.toml)")
        if ctx.php_version not in SUPPORTED_PHP_VERSIONS:
            raise EnvError(
                f"Unsupported php_version `{ctx.php_version}`, "
                f"expected one of: {', '.join(SUPPORTED_PHP_VERSIONS)}"
            )
        
        php_image = PHP_IMAGE_71 if ctx.php_version == "7.1" else PHP_IMAGE_72
        values = {
            "CONTEXT_DIR": str(ctx.cwd),
            "PHP_IMAGE": php_image,
            "DOMAINS": ",".join(ctx.domains),
            "MYSQL_DATABASE": DB_NAME,
            "MYSQL_USER": DB_USER,
            "MYSQL_PASSWORD": DB_PASS,
            "MYSQL_ROOT_PASSWORD": DB_PASS,
            "HOST_UID": str(_host_id(os, "getuid")),
            "HOST_GID": str(_host_id(os, "getgid")),
        }
        return cls(values=values)
    
    def content(self) -> bytes:
        """Render as `KEY=value` lines"""
        lines = [f"{key}={value}" for key, value in self.values.items()]
        return ("\n".join(lines) + "\n").encode("utf-8")


def _host_id(module, attr: str) -> int:
    # Windows has neither getuid nor getgid
    fn = getattr(module, attr, None)
    return fn() if fn else 1000
