"""
Lexi Daily Puzzle Server Application Package

Daily word-guessing puzzle engine served over HTTP and Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def build_engine(config_class=Config, store=None, clock=None):
    """
    Construct the puzzle engine and its collaborators once.

    Args:
        config_class: Configuration class to use
        store: Key-value store to use instead of the configured backend
        clock: DayClock to use instead of the local wall clock

    Returns:
        dict with 'puzzle', 'stats', 'gateway', 'selector', 'clock'
    """
    from .services import (
        DailyWordSelector, DayClock, PersistenceGateway, PuzzleStateMachine,
        StatsAggregator, WordBank, create_store,
    )

    clock = clock or DayClock()
    gateway = PersistenceGateway(store if store is not None else create_store(config_class))
    word_bank = WordBank.default()
    selector = DailyWordSelector(word_bank)
    stats = StatsAggregator(gateway)
    puzzle = PuzzleStateMachine(word_bank, selector, gateway, stats, clock)

    return {
        'puzzle': puzzle,
        'stats': stats,
        'gateway': gateway,
        'selector': selector,
        'clock': clock,
    }


def create_app(config_class=Config, store=None, clock=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        store: Optional key-value store (tests pass a MemoryStore)
        clock: Optional DayClock (tests pin the date)

    Returns:
        Flask application instance and its SocketIO instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # One engine per app, shared by HTTP and WebSocket handlers
    engine = build_engine(config_class, store=store, clock=clock)
    app.extensions['lexi'] = engine

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.stats_controller import stats_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(stats_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, engine['puzzle'])

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
