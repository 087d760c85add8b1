"""
Infinite Wordle Application Package

Plays archived daily word puzzles one after another, in the terminal or over
an HTTP API, on top of a shared round engine.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config

__version__ = "0.1.0"


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app
