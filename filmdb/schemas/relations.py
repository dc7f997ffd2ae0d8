"""Output schemas for records dumped together with their related collection.

The collection keys follow the model names (``Films`` on an actor,
``Actors`` on a film) and are always present, as an empty list when
nothing is linked.
"""
from marshmallow import fields

from filmdb.schemas.actor import ActorSchema
from filmdb.schemas.film import FilmSchema

class ActorWithFilmsSchema(ActorSchema):
    films = fields.Nested(FilmSchema, many=True, dump_only=True, data_key="Films")

class FilmWithActorsSchema(FilmSchema):
    actors = fields.Nested(ActorSchema, many=True, dump_only=True, data_key="Actors")


actor_with_films_schema = ActorWithFilmsSchema()
actors_with_films_schema = ActorWithFilmsSchema(many=True)
film_with_actors_schema = FilmWithActorsSchema()
films_with_actors_schema = FilmWithActorsSchema(many=True)
