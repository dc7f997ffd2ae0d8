from filmdb.models import db, film_actor

class Actor(db.Model):
    __tablename__ = "actor"
    # keys of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    actor_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(45), nullable=False)
    last_name = db.Column(db.String(45), nullable=False)

    films = db.relationship(
        "Film",
        secondary=film_actor,
        back_populates="actors",
        order_by="Film.film_id",
    )

    def __repr__(self):
        return f"<Actor {self.actor_id} {self.first_name} {self.last_name}>"
