import logging

from filmdb.errors import MissingReferenceError
from filmdb.models.actor import Actor
from filmdb.models.film import Film
from filmdb.repositories.base import BaseRepository
from filmdb.schemas.actor import actor_schema

logger = logging.getLogger(__name__)


class ActorRepository(BaseRepository[Actor]):
    model = Actor
    schema = actor_schema
    relation = "films"
    fields = ("first_name", "last_name")

    def attach(self, actor_id: int, film_id: int) -> Actor:
        """Link a film to an actor.

        Attaching a pair that is already linked leaves it as is.

        Args:
            actor_id: Key of the actor.
            film_id: Key of the film.

        Returns:
            The actor, with ``films`` including the attached film.

        Raises:
            MissingReferenceError: Either key does not resolve.
            StoreError: The store rejected the link.
        """
        with self._store("attach film to"):
            actor = self._session.get(Actor, actor_id) if self._storable(actor_id) else None
            if actor is None:
                raise MissingReferenceError("Actor", actor_id)
            film = self._session.get(Film, film_id) if self._storable(film_id) else None
            if film is None:
                raise MissingReferenceError("Film", film_id)

            if film in actor.films:
                logger.info("Film %s already attached to actor %s", film_id, actor_id)
                return actor

            actor.films.append(film)
            self._session.commit()
        logger.info("Attached film %s to actor %s", film_id, actor_id)
        return actor
