"""Flask application factory."""

import json
import logging
import os

from flask import Flask, jsonify
from pydantic import ValidationError

from pebbles.engine.errors import PebblesError

from .config import Config
from .services.game_service import GameNotFoundError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Map engine and validation errors to JSON responses."""

    @app.errorhandler(PebblesError)
    def handle_rule_violation(error: PebblesError):
        logger.warning(f"Rejected: {error.code.value}: {error}")
        return jsonify(error.to_dict()), 400

    @app.errorhandler(ValidationError)
    def handle_invalid_payload(error: ValidationError):
        logger.warning(f"Invalid payload: {error.error_count()} error(s)")
        return jsonify({
            "error": "invalid_payload",
            "details": json.loads(error.json(include_url=False)),
        }), 422

    @app.errorhandler(GameNotFoundError)
    def handle_not_found(error: GameNotFoundError):
        return jsonify({"error": "game_not_found", "message": str(error)}), 404


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Register blueprints
    from .routes import game

    app.register_blueprint(game.bp)

    register_error_handlers(app)

    return app


def main():
    """Entry point for `pebbles-web` command."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app()
    app.run(
        debug=os.environ.get("FLASK_DEBUG") == "1",
        host=os.environ.get("PEBBLES_HOST", "127.0.0.1"),
        port=int(os.environ.get("PEBBLES_PORT", "5000")),
    )


if __name__ == "__main__":
    main()
