from filmdb.repositories.actor import ActorRepository
from filmdb.repositories.base import BaseRepository
from filmdb.repositories.film import FilmRepository

__all__ = ["ActorRepository", "BaseRepository", "FilmRepository"]
