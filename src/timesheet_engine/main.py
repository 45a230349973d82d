from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.logging import configure_logging
from .timesheets.controller import register as register_timesheets


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    if app.config["DEBUG"]:
        app.logger.info("[timesheet-engine] settings=%s", settings_module)

    container = build_container(settings=settings)

    register_timesheets(app, container)

    return app
