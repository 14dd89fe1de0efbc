from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import AUTH_COOKIE_NAME, DEFAULT_TOKEN_TTL_HOURS
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .entries.controller import register as register_entries
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["AUTH_COOKIE_NAME"] = getattr(settings, "AUTH_COOKIE_NAME", AUTH_COOKIE_NAME)
    app.config["TOKEN_TTL_HOURS"] = int(getattr(settings, "TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS))
    app.config["LOGIN_STORAGE_ERROR_STATUS"] = int(getattr(settings, "LOGIN_STORAGE_ERROR_STATUS", 200))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_demo_data(db_config)

        container = build_container(
            db_config=db_config,
            jwt_secret=getattr(settings, "JWT_SECRET", None),
            token_ttl_hours=app.config["TOKEN_TTL_HOURS"],
        )

    app.extensions["school_entry"] = container

    register_users(app, container)
    register_students(app, container)
    register_entries(app, container)

    return app
