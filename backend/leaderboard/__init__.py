from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()

STORE_EXTENSION_KEY = 'score_store'

DEMO_SCORES = [
    ('ALICE', 420, 95),
    ('BOB', 310, 120),
    ('CARL', 100, 20),
]


def create_app(config_class=Config, store=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    database_uri = flask_app.config.get('SQLALCHEMY_DATABASE_URI')
    if database_uri:
        db.init_app(flask_app)
        migrate.init_app(flask_app, db)

    # Permissive CORS on every path; origins come from CORS_ORIGINS in config
    CORS(
        flask_app,
        resources={r"/*": {}},
        send_wildcard=True,
        methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type'],
    )

    # Bind the score store. An explicit store wins over the configured database.
    if store is None and database_uri:
        from leaderboard.services.scores.store import SqlScoreStore
        store = SqlScoreStore(db)
    if store is None:
        flask_app.logger.error('[startup] no database configured; score store binding is missing')
    else:
        flask_app.extensions[STORE_EXTENSION_KEY] = store

    from leaderboard.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Import and register blueprints here
    from leaderboard.main import main
    flask_app.register_blueprint(main)

    from leaderboard.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api')

    @click.command('init-db')
    def init_db_command():
        """Creates any missing tables."""
        from leaderboard import models  # noqa: F401
        with flask_app.app_context():
            db.create_all()
            print('Database tables are in place.')

    @click.command('db-reset')
    @click.option('--seed', is_flag=True, help='Insert a few demo scores.')
    def db_reset_command(seed):
        """Drops, recreates, and optionally seeds the database."""
        from leaderboard.models import Score
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            if seed:
                for name, score_value, time_score in DEMO_SCORES:
                    db.session.add(Score(name=name, score_value=score_value, time_score=time_score))

            db.session.commit()
            print('Database has been reset' + (' and seeded!' if seed else '!'))

    if database_uri:
        flask_app.cli.add_command(init_db_command)
        flask_app.cli.add_command(db_reset_command)

    return flask_app
