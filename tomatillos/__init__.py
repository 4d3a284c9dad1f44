from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from tomatillos.config import Config
from tomatillos.logger import logger

db = SQLAlchemy()


def create_app(config_class=Config):
    app = Flask(__name__)
    # Load configuration from the Config class
    app.config.from_object(config_class)

    # Initialize SQLAlchemy with the app
    db.init_app(app)

    # The provider owns the helper; the table is created on first access
    from tomatillos.db_helper import TomatilloDBHelper
    from tomatillos.provider import TomatilloProvider
    app.extensions["tomatillos"] = TomatilloProvider(TomatilloDBHelper(db))

    # Register blueprints
    from tomatillos.routes.movie import movie
    app.register_blueprint(movie)

    logger.debug(
        f"App created with database {app.config['SQLALCHEMY_DATABASE_URI']}")
    return app
