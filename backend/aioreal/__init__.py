from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Read-side caches and the live session hub are owned by the app
    from aioreal.services.cache import build_caches
    from aioreal.services.games.hub import GameHub
    flask_app.extensions['aioreal_caches'] = build_caches(flask_app.config)
    flask_app.extensions['aioreal_hub'] = GameHub(flask_app)

    from aioreal.main import main
    flask_app.register_blueprint(main)

    from aioreal.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api')

    from aioreal.api.leaderboard import leaderboard
    flask_app.register_blueprint(leaderboard, url_prefix='/api/leaderboard')

    from aioreal.api.catalog import catalog
    flask_app.register_blueprint(catalog, url_prefix='/api')

    from aioreal.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from aioreal.seed import seed_reference_data
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            counts = seed_reference_data()
            print(f"Database has been reset and seeded! ({counts['ai']} AI + {counts['real']} real images, {counts['countries']} countries)")

    flask_app.cli.add_command(db_reset_command)

    return flask_app
