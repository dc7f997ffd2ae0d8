from filmdb.models.film import Film
from filmdb.repositories.base import BaseRepository
from filmdb.schemas.film import FILM_FIELDS, film_schema


class FilmRepository(BaseRepository[Film]):
    model = Film
    schema = film_schema
    relation = "actors"
    fields = FILM_FIELDS
