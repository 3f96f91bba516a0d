import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify
from flask_cors import CORS

from config import settings
from models.user import db
from server import ai, exoplanets, users
from utils.api_client import GeminiClient
from utils.errors import ServiceError

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(uri: str) -> None:
    prefix = "sqlite:///"
    if uri.startswith(prefix) and uri != prefix + ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(uri[len(prefix):])), exist_ok=True)


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(
        DATA_CSV=settings.DATA_CSV,
        SECRET_KEY=settings.SECRET_KEY,
        SQLALCHEMY_DATABASE_URI=settings.DATABASE_URL,
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
    )
    app.json.sort_keys = False
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    CORS(app, resources={r"/api/*": {"origins": settings.CORS_ORIGINS}}, supports_credentials=True)

    app.extensions["gemini"] = app.config.get("GEMINI_CLIENT") or GeminiClient()

    _ensure_sqlite_dir(app.config["SQLALCHEMY_DATABASE_URI"])
    db.init_app(app)
    with app.app_context():
        db.create_all()

    app.register_blueprint(exoplanets.bp)
    app.register_blueprint(ai.bp)
    app.register_blueprint(users.bp)

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        if err.status_code >= 500:
            logger.error("%s: %s (%s)", type(err).__name__, err.message, err.details)
        else:
            logger.warning("%s: %s", type(err).__name__, err.message)
        return jsonify(err.to_dict()), err.status_code

    return app


if __name__ == '__main__':
    create_app().run(debug=True)
