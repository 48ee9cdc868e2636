from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import build_container


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    analysis_config = getattr(settings, "ANALYSIS_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    if app.config["DEBUG"]:
        app.logger.info("[attendance-compliance] settings=%s analysis=%s", settings_module, analysis_config)

    container = build_container(analysis_config=analysis_config)

    register_attendance(app, container)

    return app
