from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .ledger.controller import register as register_ledger
from .manual.controller import register as register_manual
from .scanning.controller import register as register_scanning

_SETTING_KEYS = (
    "RESOLVER_URL",
    "RESOLVER_TIMEOUT_SECONDS",
    "RESOLVER_WORKERS",
    "LEDGER_PATH",
    "EXPORT_DIR",
    "SCAN_COOLDOWN_SECONDS",
    "MAX_CAPTURE_FAILURES",
    "ROLES",
    "LOG_LEVEL",
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, overrides: Optional[dict] = None) -> Flask:
    """Application factory.

    When a container is passed in (tests), its scan controller is not started;
    the caller drives it.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    for key in _SETTING_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger = logging.getLogger(__name__)
    logger.info(
        "settings=%s ledger=%s resolver=%s",
        settings_module,
        app.config.get("LEDGER_PATH"),
        app.config.get("RESOLVER_URL"),
    )

    if container is None:
        container = build_container(app_config=app.config)
        container.scan_controller.start()
    app.extensions["assistance_register"] = container

    register_scanning(app, container)
    register_manual(app, container)
    register_ledger(app, container)

    return app
