import logging

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from filmdb.commands import register_commands
from filmdb.config import config
from filmdb.docs import docs_router
from filmdb.models import init_db
from filmdb.routes import routes
from filmdb.routes.responses import error_body

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(app):
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("filmdb").setLevel(app.config["LOG_LEVEL"])

def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return error_body(exc.name, exc.description), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_body("Error en el servidor"), 500

def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or config)
    app.json.sort_keys = False
    app.json.ensure_ascii = False
    configure_logging(app)

    init_db(app)

    app.register_blueprint(routes)
    app.register_blueprint(docs_router, url_prefix=app.config["API_DOCS_PATH"])
    register_commands(app)
    register_error_handlers(app)

    logger.info("API docs served at %s", app.config["API_DOCS_PATH"])
    return app
