"""
Project constants definitions
"""

# ============================================================
# Project Defaults
# ============================================================

DEFAULT_PROJECT_NAME = "wf2_default"
DEFAULT_CWD = "/users/shane"
DEFAULT_TERM_WIDTH = 80
DEFAULT_TERM_HEIGHT = 30
DEFAULT_DOMAINS = ["local.m2"]
DEFAULT_PHP_VERSION = "7.2"
SUPPORTED_PHP_VERSIONS = ["7.1", "7.2"]
DEFAULT_RECIPE = "M2"
SUPPORTED_RECIPES = ["M2"]

# ============================================================
# Configuration
# ============================================================

CONFIG_FILE_NAME = "wf2.toml"
ENV_PREFIX = "WF2_"

# ============================================================
# Containers
# ============================================================

CONTAINER_PREFIX = "wf2"
FILE_PREFIX = ".wf2_m2_"
COMPOSE_FILE_NAME = "docker-compose.yml"
ENV_FILE_NAME = ".env"
REMOTE_ROOT = "/var/www"
PHP_USER = "www-data"
ROOT_USER = "root"

# ============================================================
# Database
# ============================================================

DB_USER = "docker"
DB_PASS = "docker"
DB_NAME = "docker"
DB_DUMP_FILE = "dump.sql"
