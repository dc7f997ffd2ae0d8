import os

from dotenv import load_dotenv

load_dotenv()

class Config(object):
    TESTING = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # OpenAPI document served under API_DOCS_PATH
    API_TITLE = 'API de Actores y Películas'
    API_VERSION = '1.0.0'
    OPENAPI_VERSION = '3.0.3'
    API_DOCS_PATH = '/api-docs'

class ProdConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('PROD_DATABASE_URI')

class DevConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI', 'sqlite:///filmdb.sqlite3')

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'

match os.getenv('ENV'):
    case 'PRODUCTION':
        config = ProdConfig
    case 'TESTING':
        config = TestConfig
    case _:
        config = DevConfig
