# coding: utf8
import os

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import default_exceptions

from .errors.handler import api_error_handler
from .extensions import db, redis_client
from .lib.logger import log as logger


def create_app(config_app):
    app = Flask(__name__)

    cors_scheme = os.environ.get("CORS_SCHEME") or "*"

    CORS(app, resources={r"/*": {"origins": cors_scheme}})
    app.config.from_object(config_app)
    __init_app(app)
    __register_blueprint(app)
    __config_error_handlers(app)

    @app.route("/")
    def index():
        return {"ok": True, "message": "Storefront API"}

    return app


def __register_blueprint(app):
    from storefront.api import bp as api_bp

    app.register_blueprint(api_bp)


def __init_app(app):
    from storefront import models  # noqa: F401

    db.init_app(app)
    redis_client.init_app(app, decode_responses=True)

    logger.info("Initial app...")


def __config_error_handlers(app):
    for exp in default_exceptions:
        app.register_error_handler(exp, api_error_handler)
    app.register_error_handler(Exception, api_error_handler)
