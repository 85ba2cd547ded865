from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import MAX_DAILY_REPORT_DAYS, MAX_REPORT_DAYS
from .reports.controller import register as register_reports


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)
    if app.config["DEBUG"]:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    container = build_container(
        db_config=db_config,
        max_report_days=int(getattr(settings, "MAX_REPORT_DAYS", MAX_REPORT_DAYS)),
        max_daily_days=int(getattr(settings, "MAX_DAILY_REPORT_DAYS", MAX_DAILY_REPORT_DAYS)),
    )

    register_reports(app, container)

    return app
