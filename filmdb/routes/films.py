from flask import Blueprint, request
from marshmallow import ValidationError

from filmdb.errors import StoreError
from filmdb.models import db
from filmdb.repositories import FilmRepository
from filmdb.routes.responses import invalid_payload, not_found, store_failure
from filmdb.schemas.film import film_schema, films_schema
from filmdb.schemas.relations import film_with_actors_schema, films_with_actors_schema

# Blueprint gets inserted into flask app
films_router = Blueprint('films', __name__, url_prefix='/films')

FILMS_EMPTY = "No se encontraron películas para listar"
FILM_NOT_FOUND = "Película no encontrada"

def film_repository():
    return FilmRepository(db.session)

@films_router.get("")
def read_all_films():
    """Obtener todas las películas
    ---
    get:
      summary: Obtener todas las películas
      responses:
        200:
          description: Lista de todas las películas.
          content:
            application/json:
              schema:
                type: array
                items:
                  $ref: '#/components/schemas/Film'
        404:
          description: No se encontraron películas para listar.
        500:
          description: Error al traer las películas.
    """
    try:
        films = film_repository().list_all()
    except StoreError as exc:
        return store_failure("No se pudieron traer las películas", exc)

    if not films:
        return not_found(FILMS_EMPTY)
    return films_schema.dump(films), 200

@films_router.post("")
def create_film():
    """Crear una nueva película
    ---
    post:
      summary: Crear una nueva película
      requestBody:
        required: true
        content:
          application/json:
            schema:
              $ref: '#/components/schemas/Film'
      responses:
        201:
          description: Película creada exitosamente.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Film'
        400:
          description: Falta el título o algún campo tiene un tipo incorrecto.
        500:
          description: Error al crear la película.
    """
    try:
        film = film_repository().create(request.get_json(silent=True))
    except ValidationError as err:
        return invalid_payload(err)
    except StoreError as exc:
        return store_failure("No se pudo crear la película", exc)

    return film_schema.dump(film), 201

@films_router.get("/actors")
def read_all_films_with_actors():
    """Obtener todas las películas con sus actores asociados
    ---
    get:
      summary: Obtener todas las películas con sus actores asociados
      responses:
        200:
          description: Lista de películas, cada una con sus actores en `Actors`.
          content:
            application/json:
              schema:
                type: array
                items:
                  $ref: '#/components/schemas/FilmWithActors'
        404:
          description: No se encontraron películas para listar.
        500:
          description: Error al traer las películas con actores.
    """
    try:
        films = film_repository().list_all_with_relations()
    except StoreError as exc:
        return store_failure("No se pudieron obtener las películas con sus actores", exc)

    if not films:
        return not_found(FILMS_EMPTY)
    return films_with_actors_schema.dump(films), 200

@films_router.get("/<int:film_id>")
def read_film(film_id):
    """Obtener una película por ID
    ---
    get:
      summary: Obtener una película por ID
      parameters:
        - in: path
          name: film_id
          required: true
          schema:
            type: integer
          description: ID de la película
      responses:
        200:
          description: Datos de la película.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Film'
        404:
          description: Película no encontrada.
        500:
          description: Error al traer la película.
    """
    try:
        film = film_repository().get_by_key(film_id)
    except StoreError as exc:
        return store_failure("No se pudo obtener la película", exc)

    if film is None:
        return not_found(FILM_NOT_FOUND)
    return film_schema.dump(film), 200

@films_router.get("/<int:film_id>/actors")
def read_film_actors(film_id):
    """Obtener los actores de una película específica
    ---
    get:
      summary: Obtener los actores de una película específica
      parameters:
        - in: path
          name: film_id
          required: true
          schema:
            type: integer
          description: ID de la película
      responses:
        200:
          description: La película con sus actores en `Actors`.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/FilmWithActors'
        404:
          description: Película no encontrada.
        500:
          description: Error al traer los actores de la película.
    """
    try:
        film = film_repository().get_by_key_with_relations(film_id)
    except StoreError as exc:
        return store_failure("No se pudieron obtener los actores de la película", exc)

    if film is None:
        return not_found(FILM_NOT_FOUND)
    return film_with_actors_schema.dump(film), 200

@films_router.put("/<int:film_id>")
def update_film(film_id):
    """Actualizar una película
    ---
    put:
      summary: Actualizar una película
      description: Reemplaza la película; los campos opcionales omitidos quedan en null.
      parameters:
        - in: path
          name: film_id
          required: true
          schema:
            type: integer
          description: ID de la película
      requestBody:
        required: true
        content:
          application/json:
            schema:
              $ref: '#/components/schemas/Film'
      responses:
        200:
          description: Película actualizada exitosamente.
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Film'
        400:
          description: Falta el título o algún campo tiene un tipo incorrecto.
        404:
          description: Película no encontrada.
        500:
          description: Error al actualizar la película.
    """
    try:
        film = film_repository().update(film_id, request.get_json(silent=True))
    except ValidationError as err:
        return invalid_payload(err)
    except StoreError as exc:
        return store_failure("No se pudo actualizar la película", exc)

    if film is None:
        return not_found(FILM_NOT_FOUND)
    return film_schema.dump(film), 200

@films_router.delete("/<int:film_id>")
def delete_film(film_id):
    """Eliminar una película
    ---
    delete:
      summary: Eliminar una película
      description: También se eliminan sus vínculos con actores.
      parameters:
        - in: path
          name: film_id
          required: true
          schema:
            type: integer
          description: ID de la película
      responses:
        204:
          description: Película eliminada exitosamente.
        404:
          description: Película no encontrada.
        500:
          description: Error al eliminar la película.
    """
    try:
        deleted = film_repository().delete(film_id)
    except StoreError as exc:
        return store_failure("No se pudo eliminar la película", exc)

    if not deleted:
        return not_found(FILM_NOT_FOUND)
    return "", 204
