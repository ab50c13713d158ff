import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from dietmatch.extensions import cors
from dietmatch.routes import register_routes
from dietmatch.services.dataset_service import FOOD_TABLE_KEY, load_food_table_from_config
from dietmatch.utils.errors import DataLoadError
from dietmatch.utils.http import error


def create_app(config_overrides=None, food_table=None):
    """
    Build the Flask app.

    ``food_table`` injects an already loaded table (tests); otherwise the CSV
    at FOODS_CSV_PATH is read before any route is served. A failed load leaves
    the app in a not-ready state instead of serving an empty table.
    """
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])
    logging.getLogger("dietmatch").setLevel(app.config["LOG_LEVEL"])

    cors.init_app(app, origins=app.config["CORS_ORIGINS"])

    if food_table is None:
        try:
            food_table = load_food_table_from_config(app.config)
        except DataLoadError as e:
            app.logger.error("Dataset not loaded, service is not ready: %s", e)
    app.extensions[FOOD_TABLE_KEY] = tuple(food_table) if food_table is not None else None

    register_routes(app)
    register_error_handlers(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return error(e.name.upper().replace(" ", "_"), e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("Unhandled error")
        return error("INTERNAL_ERROR", "Internal server error.", 500)
