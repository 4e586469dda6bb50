from __future__ import annotations

import importlib
import logging
import os
from datetime import timedelta
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .children.controller import register as register_children
from .common.datetime_utils import utc_now_iso
from .config import get_settings_module
from .container import build_container
from .entries.controller import register as register_entries
from .reports.controller import register as register_reports
from .users.controller import register as register_auth

log = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SECRET_KEY"] = getattr(settings, "SECRET_KEY")
    app.config["DATA_DIR"] = getattr(settings, "DATA_DIR")
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(hours=int(getattr(settings, "SESSION_LIFETIME_HOURS", 24)))
    if overrides:
        app.config.update(overrides)
    app.secret_key = app.config["SECRET_KEY"]

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    log.info("[kiddytime] settings=%s data_dir=%s", settings_module, app.config["DATA_DIR"])

    container = build_container(data_dir=app.config["DATA_DIR"])
    app.extensions["kiddytime"] = container

    register_auth(app, container)
    register_children(app, container)
    register_entries(app, container)
    register_reports(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "timestamp": utc_now_iso()})

    return app


def run() -> None:
    app = create_app()
    port = int(os.getenv("PORT", "3000"))
    log.info("Server running on port %d", port)
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
