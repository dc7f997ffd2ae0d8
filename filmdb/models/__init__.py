import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event

db = SQLAlchemy()

def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def init_db(app):
    db.init_app(app)
    with app.app_context():
        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", enable_sqlite_foreign_keys)

from filmdb.models.film_actor import FilmActor  # noqa: E402

film_actor = FilmActor.__table__

from filmdb.models.actor import Actor  # noqa: E402
from filmdb.models.film import Film  # noqa: E402

__all__ = ["db", "init_db", "film_actor", "Actor", "Film", "FilmActor"]
