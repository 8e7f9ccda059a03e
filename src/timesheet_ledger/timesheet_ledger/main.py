from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container, settings_dict
from .ledger.controller import register as register_ledger


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = settings_dict(importlib.import_module(settings_module))
    settings.update(overrides or {})

    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("timesheet_ledger")
    logger.info(
        "settings=%s shifts=%d default_shift=%s",
        settings_module,
        len(settings.get("SHIFTS", [])),
        settings.get("DEFAULT_SHIFT_ID"),
    )

    container = build_container(settings=settings)
    app.extensions["timesheet_ledger"] = container

    register_ledger(app, container)

    return app
