# filmdb/models/film_actor.py
from filmdb.models import db

class FilmActor(db.Model):
    __tablename__ = "film_actor"

    # composite key: an actor is linked to a given film at most once
    actor_id = db.Column(
        db.Integer, db.ForeignKey("actor.actor_id", ondelete="CASCADE"), primary_key=True
    )
    film_id = db.Column(
        db.Integer, db.ForeignKey("film.film_id", ondelete="CASCADE"), primary_key=True
    )
