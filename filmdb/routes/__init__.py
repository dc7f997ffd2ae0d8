from flask import Blueprint

from filmdb.routes.actors import actors_router
from filmdb.routes.films import films_router

routes = Blueprint('api', __name__)

routes.register_blueprint(actors_router)
routes.register_blueprint(films_router)

@routes.get("/")
def index():
    return "Hola mundo!"
