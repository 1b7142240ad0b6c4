from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:8081",
    "http://localhost:19006",
]

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    from monopoly.routes import main
    flask_app.register_blueprint(main)

    from monopoly.api.players import players
    flask_app.register_blueprint(players, url_prefix='/players')

    from monopoly.api.games import games
    flask_app.register_blueprint(games, url_prefix='/games')

    from monopoly.error_handlers import register_error_handlers
    register_error_handlers(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from monopoly.seed import seed_monopoly
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            seed_monopoly()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
