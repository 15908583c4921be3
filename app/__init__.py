"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, wire the store and suggestion engine, register error handlers
and route blueprints. Collaborators can be injected for tests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Optional

import click
from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from app.config import Config, validate_environment
from app.errors import DiaryError, InternalError
from app.logging_config import setup_logging
from app.routes.categories import categories_bp
from app.routes.entries import entries_bp
from app.routes.suggestions import suggestions_bp
from app.routes.topics import topics_bp
from app.schemas import Topic
from app.services.llm_service import LLMService
from app.services.store_service import JsonStore

# Load .env for local dev if available
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(
    config_overrides: Optional[Dict[str, Any]] = None,
    store: Any = None,
    engine: Any = None,
    env_validator: Optional[Callable[[], None]] = None,
) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    setup_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    store = store or JsonStore(app.config["DB_DIR"])
    required_env = list(app.config["REQUIRED_ENV_VARS"])
    app.extensions["diary"] = {
        "store": store,
        "engine": engine or LLMService(
            store,
            model_name=app.config["LLM_MODEL"],
            temperature=app.config["LLM_TEMPERATURE"],
        ),
        "env_validator": env_validator or (lambda: validate_environment(required_env)),
        "stats_max_workers": app.config["STATS_MAX_WORKERS"],
        "default_language": app.config["DEFAULT_LANGUAGE"],
    }

    @app.errorhandler(DiaryError)
    def handle_diary_error(e: DiaryError):
        if isinstance(e, InternalError):
            logger.error(
                "Request failed [%s]: %s (cause: %r)", e.kind.value, e.message, e.__cause__,
                exc_info=e.__cause__,
            )
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(500)
    def handle_unexpected(e):
        return jsonify({"error": "Internal server error"}), 500

    # Blueprints
    app.register_blueprint(entries_bp)
    app.register_blueprint(topics_bp)
    app.register_blueprint(suggestions_bp)
    app.register_blueprint(categories_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.cli.command("seed-topics")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    def seed_topics(path: str):
        """Load topics from a JSON array of camelCase topic objects."""
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        store_ = app.extensions["diary"]["store"]
        for row in rows:
            topic = store_.put_topic(Topic.model_validate(row))
            click.echo(f"seeded {topic.user_id}/{topic.topic_id}")

    return app
