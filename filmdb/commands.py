import click
from flask.cli import with_appcontext

from filmdb.models import db
from filmdb.repositories import ActorRepository, FilmRepository

INCEPTION = {
    "title": "Inception",
    "description": (
        "Dom Cobb es un ladrón con una extraña habilidad para entrar a los sueños "
        "de la gente y robarles los secretos de sus subconscientes."
    ),
    "release_year": 2010,
}

@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop every table before creating them.")
@with_appcontext
def init_db_command(drop):
    """Create the actor, film and film_actor tables."""
    if drop:
        db.drop_all()
    db.create_all()
    click.echo("Base de datos inicializada")

@click.command("seed")
@with_appcontext
def seed_command():
    """Create a sample actor and film and link them."""
    actor = ActorRepository(db.session).create({"first_name": "Leo", "last_name": "Di Caprio"})
    film = FilmRepository(db.session).create(INCEPTION)
    click.echo("agregando peli y actor ...")
    ActorRepository(db.session).attach(actor.actor_id, film.film_id)
    click.echo(f"Actor {actor.actor_id} asociado a la película {film.film_id}")

def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_command)
