import os
from typing import Optional

DEFAULT_SETTINGS_MODULE = "config.development"

# APP_ENV aliases -> settings module
SETTINGS_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module(app_env: Optional[str] = None) -> str:
    """Settings module for the timesheet engine; unknown environments use development."""
    env = (app_env if app_env is not None else os.getenv("APP_ENV", "")).strip().lower()
    return SETTINGS_MODULES.get(env, DEFAULT_SETTINGS_MODULE)
