from flask import Blueprint, request
from marshmallow import ValidationError

from filmdb.errors import MissingReferenceError, StoreError
from filmdb.models import db
from filmdb.repositories import ActorRepository
from filmdb.routes.responses import invalid_payload, not_found, store_failure
from filmdb.schemas.actor import actor_schema, actors_schema
from filmdb.schemas.relations import actor_with_films_schema, actors_with_films_schema

# Blueprint gets inserted into flask app
actors_router = Blueprint('actors', __name__, url_prefix='/actors')

ACTORS_EMPTY = "No se encontraron actores para listar"
ACTOR_NOT_FOUND = "Actor no encontrado"

def actor_repository():
    return ActorRepository(db.session)

@actors_router.get("")
def read_all_actors():
    """Obtener todos los actores
    ---
    get:
      summary: Obtener todos los actores
      responses:
        200:
          description: Lista de actores.
          content:
            application/json:
              schema:
                type: array
                items:
                  $ref: '#/components/schemas/Actor'
        404:
          description: No se encontraron actores para listar.
        500:
          description: Error en el servidor.
    """
    try:
        actors = actor_repository().list_all()
    except StoreError as exc:
        return store_failure("No se pudieron obtener los actores", exc)

    if not actors:
        return not_found(ACTORS_EMPTY)
    return actors_schema.dump(actors), 200

@actors_router.get("/films")
def read_all_actors_with_films():
    """Obtener todos los actores con sus películas asociadas
    ---
    get:
      summary: Obtener todos los actores con sus películas asociadas
      responses:
        200:
          description: Lista de actores, cada uno con sus películas en `Films`.
          content:
            application/json:
              schema:
                type: array
                items:
                  $ref: '#/components/schemas/ActorWithFilms'
        404:
          description: No se encontraron actores para listar.
        500:
          description: Error al traer los actores con películas.
    """
    try:
        actors = actor_repository().list_all_with_relations()
    except StoreError as exc:
        return store_failure("No se pudieron obtener los actores con sus películas", exc)

    if not actors:
        return not_found(ACTORS_EMPTY)
    return actors_with_films_schema.dump(actors), 200

@actors_router.post("/bulk")
def create_actors_bulk():
    """Crear varios actores en bloque
    ---
    post:
      summary: Crear varios actores en bloque
      description: Se crean todos los actores o ninguno.
      requestBody:
        required: true
        content:
          application/json:
            schema:
              type: array
              items:
                $ref: '#/components/schemas/Actor'
      responses:
        201:
          description: Actores creados exitosamente.
        400:
          description: Algún actor no es válido.
        500:
          description: Error al crear los actores.
    """
    try:
        actors = actor_repository().bulk_create(request.get_json(silent=True))
    except ValidationError as err:
        return invalid_payload(err)
    except StoreError as exc:
        return store_failure("No se pudieron crear los actores", exc)

    return actors_schema.dump(actors), 201

@actors_router.post("")
def create_actor():
    """Crear un nuevo actor
    ---
    post:
      summary: Crear un nuevo actor
      requestBody:
        required: true
        content:
          application/json:
            schema:
              $ref: '#/components/schemas/Actor'
      responses:
        201:
          description: Actor creado exitosamente.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Actor'
        400:
          description: Faltan campos obligatorios.
        500:
          description: Error al crear el actor.
    """
    try:
        actor = actor_repository().create(request.get_json(silent=True))
    except ValidationError as err:
        return invalid_payload(err)
    except StoreError as exc:
        return store_failure("No se pudo crear el actor", exc)

    return actor_schema.dump(actor), 201

@actors_router.get("/<int:actor_id>")
def read_actor(actor_id):
    """Obtener un actor por ID
    ---
    get:
      summary: Obtener un actor por ID
      parameters:
        - in: path
          name: actor_id
          required: true
          schema:
            type: integer
          description: ID del actor
      responses:
        200:
          description: Datos del actor.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Actor'
        404:
          description: Actor no encontrado.
        500:
          description: Error al traer el actor.
    """
    try:
        actor = actor_repository().get_by_key(actor_id)
    except StoreError as exc:
        return store_failure("No se pudo obtener el actor", exc)

    if actor is None:
        return not_found(ACTOR_NOT_FOUND)
    return actor_schema.dump(actor), 200

@actors_router.get("/<int:actor_id>/films")
def read_actor_films(actor_id):
    """Obtener las películas de un actor por su ID
    ---
    get:
      summary: Obtener las películas de un actor por su ID
      parameters:
        - in: path
          name: actor_id
          required: true
          schema:
            type: integer
          description: ID del actor
      responses:
        200:
          description: El actor con sus películas en `Films`.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/ActorWithFilms'
        404:
          description: Actor no encontrado.
        500:
          description: Error al obtener las películas del actor.
    """
    try:
        actor = actor_repository().get_by_key_with_relations(actor_id)
    except StoreError as exc:
        return store_failure("No se pudieron obtener las películas del actor", exc)

    if actor is None:
        return not_found(ACTOR_NOT_FOUND)
    return actor_with_films_schema.dump(actor), 200

@actors_router.post("/<int:actor_id>/films/<int:film_id>")
def attach_film(actor_id, film_id):
    """Asociar una película a un actor
    ---
    post:
      summary: Asociar una película a un actor
      description: Asociar dos veces el mismo par no crea un segundo vínculo.
      parameters:
        - in: path
          name: actor_id
          required: true
          schema:
            type: integer
          description: ID del actor
        - in: path
          name: film_id
          required: true
          schema:
            type: integer
          description: ID de la película
      responses:
        201:
          description: El actor con sus películas en `Films`.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/ActorWithFilms'
        404:
          description: Actor o película no encontrados.
        500:
          description: Error al asociar la película.
    """
    try:
        actor = actor_repository().attach(actor_id, film_id)
    except MissingReferenceError as err:
        return not_found("Actor o película no encontrados", str(err))
    except StoreError as exc:
        return store_failure("No se pudo asociar la película al actor", exc)

    return actor_with_films_schema.dump(actor), 201

@actors_router.put("/<int:actor_id>")
def update_actor(actor_id):
    """Actualizar un actor
    ---
    put:
      summary: Actualizar un actor
      parameters:
        - in: path
          name: actor_id
          required: true
          schema:
            type: integer
          description: ID del actor
      requestBody:
        required: true
        content:
          application/json:
            schema:
              $ref: '#/components/schemas/Actor'
      responses:
        200:
          description: Actor actualizado exitosamente.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Actor'
        400:
          description: Faltan campos obligatorios.
        404:
          description: Actor no encontrado.
        500:
          description: Error al actualizar el actor.
    """
    try:
        actor = actor_repository().update(actor_id, request.get_json(silent=True))
    except ValidationError as err:
        return invalid_payload(err)
    except StoreError as exc:
        return store_failure("No se pudo actualizar el actor", exc)

    if actor is None:
        return not_found(ACTOR_NOT_FOUND)
    return actor_schema.dump(actor), 200

@actors_router.delete("/<int:actor_id>")
def delete_actor(actor_id):
    """Eliminar un actor
    ---
    delete:
      summary: Eliminar un actor
      description: También se eliminan sus vínculos con películas.
      parameters:
        - in: path
          name: actor_id
          required: true
          schema:
            type: integer
          description: ID del actor
      responses:
        204:
          description: Actor eliminado exitosamente.
        404:
          description: Actor no encontrado.
        500:
          description: Error al eliminar el actor.
    """
    try:
        deleted = actor_repository().delete(actor_id)
    except StoreError as exc:
        return store_failure("No se pudo eliminar el actor", exc)

    if not deleted:
        return not_found(ACTOR_NOT_FOUND)
    return "", 204
