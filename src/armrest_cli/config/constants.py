"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "armrest-cli"
APP_AUTHOR = "armrest"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_SUBSCRIPTION_ID = "AZURE_SUBSCRIPTION_ID"
ENV_TENANT_ID = "AZURE_TENANT_ID"
ENV_CLIENT_ID = "AZURE_CLIENT_ID"
ENV_CLIENT_SECRET = "AZURE_CLIENT_SECRET"
ENV_ACCESS_TOKEN = "AZURE_ACCESS_TOKEN"
ENV_RESOURCE_GROUP = "AZURE_RESOURCE_GROUP"
ENV_PROFILE = "ARMREST_PROFILE"

# API defaults
DEFAULT_ENVIRONMENT_URL = "https://management.azure.com"
DEFAULT_AUTHORITY_URL = "https://login.microsoftonline.com"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_MAX_THREADS = 10

# Seconds before expiry at which a cached token is treated as stale
TOKEN_EXPIRY_MARGIN = 300
