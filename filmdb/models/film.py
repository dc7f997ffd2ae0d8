from filmdb.models import db, film_actor

class Film(db.Model):
    __tablename__ = "film"
    # keys of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    film_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    release_year = db.Column(db.Integer)

    actors = db.relationship(
        "Actor",
        secondary=film_actor,
        back_populates="films",
        order_by="Actor.actor_id",
    )

    def __repr__(self):
        return f"<Film {self.film_id} {self.title!r}>"
