"""JSON error bodies shared by the blueprints: ``{"error": ..., "description": ...}``."""
import logging

from filmdb.errors import describe_validation_error

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Datos inválidos"

def error_body(message, description=None):
    body = {"error": message}
    if description:
        body["description"] = description
    return body

def not_found(message, description=None):
    return error_body(message, description), 404

def invalid_payload(err):
    return error_body(INVALID_PAYLOAD, describe_validation_error(err)), 400

def store_failure(message, exc):
    logger.error("%s: %s", message, exc)
    return error_body(message), 500
