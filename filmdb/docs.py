"""OpenAPI document and Swagger UI page.

Each documented view carries its operations as YAML after a ``---`` line
in its docstring, keyed by HTTP method. They are collected from the URL map
of the running app, so every route registered under the ``api`` blueprint
shows up without being listed here. Bodies reference the shared
``components`` declared below.
"""
import re
import textwrap

import yaml
from flask import Blueprint, current_app, render_template_string, url_for

docs_router = Blueprint("docs", __name__)

DOCSTRING_SEPARATOR = "---"

# <int:actor_id> -> {actor_id}
RULE_ARGUMENT = re.compile(r"<(?:[^<>:]+:)?([^<>]+)>")

COMPONENTS = {
    "schemas": {
        "Actor": {
            "type": "object",
            "properties": {
                "actor_id": {
                    "type": "integer",
                    "readOnly": True,
                    "description": "ID único del actor",
                    "example": 1,
                },
                "first_name": {
                    "type": "string",
                    "maxLength": 45,
                    "description": "Nombre del actor",
                    "example": "John",
                },
                "last_name": {
                    "type": "string",
                    "maxLength": 45,
                    "description": "Apellido del actor",
                    "example": "Doe",
                },
            },
            "required": ["first_name", "last_name"],
        },
        "Film": {
            "type": "object",
            "properties": {
                "film_id": {
                    "type": "integer",
                    "readOnly": True,
                    "description": "ID único de la película",
                    "example": 1,
                },
                "title": {
                    "type": "string",
                    "maxLength": 255,
                    "description": "Título de la película",
                    "example": "Avengers",
                },
                "description": {
                    "type": "string",
                    "nullable": True,
                    "description": "Descripción de la película",
                    "example": "Superhero movie",
                },
                "release_year": {
                    "type": "integer",
                    "nullable": True,
                    "minimum": 0,
                    "maximum": 9999,
                    "description": "Año de lanzamiento de la película",
                    "example": 2012,
                },
            },
            "required": ["title"],
        },
        "FilmActor": {
            "type": "object",
            "properties": {
                "film_id": {"type": "integer", "description": "ID de la película", "example": 1},
                "actor_id": {"type": "integer", "description": "ID del actor", "example": 1},
            },
            "required": ["film_id", "actor_id"],
        },
        "ActorWithFilms": {
            "allOf": [
                {"$ref": "#/components/schemas/Actor"},
                {
                    "type": "object",
                    "properties": {
                        "Films": {"type": "array", "items": {"$ref": "#/components/schemas/Film"}},
                    },
                },
            ]
        },
        "FilmWithActors": {
            "allOf": [
                {"$ref": "#/components/schemas/Film"},
                {
                    "type": "object",
                    "properties": {
                        "Actors": {"type": "array", "items": {"$ref": "#/components/schemas/Actor"}},
                    },
                },
            ]
        },
    }
}

SWAGGER_UI = """<!DOCTYPE html>
<html lang="es">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({url: "{{ spec_url }}", dom_id: "#swagger-ui"});
  </script>
</body>
</html>
"""


def load_operations(view):
    """Parse the YAML operations of a view docstring, ``{}`` when undocumented."""
    doc = view.__doc__ or ""
    if DOCSTRING_SEPARATOR not in doc:
        return {}
    operations = yaml.safe_load(textwrap.dedent(doc.split(DOCSTRING_SEPARATOR, 1)[1])) or {}
    for operation in operations.values():
        # YAML reads status codes as ints
        operation["responses"] = {
            str(status): response for status, response in operation.get("responses", {}).items()
        }
    return operations


def openapi_path(rule):
    return RULE_ARGUMENT.sub(r"{\1}", rule.rule)


def build_spec(app):
    """Collect every documented ``api`` view of ``app`` into an OpenAPI document."""
    paths = {}
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        if not rule.endpoint.startswith("api."):
            continue
        operations = load_operations(app.view_functions[rule.endpoint])
        if operations:
            paths.setdefault(openapi_path(rule), {}).update(operations)

    return {
        "openapi": app.config["OPENAPI_VERSION"],
        "info": {
            "title": app.config["API_TITLE"],
            "version": app.config["API_VERSION"],
            "description": "Documentación de la API de Actores y Películas",
        },
        "paths": paths,
        "components": COMPONENTS,
    }


@docs_router.get("/openapi.json")
def openapi_document():
    return build_spec(current_app)


@docs_router.get("")
def swagger_ui():
    return render_template_string(
        SWAGGER_UI,
        title=current_app.config["API_TITLE"],
        spec_url=url_for("docs.openapi_document"),
    )
