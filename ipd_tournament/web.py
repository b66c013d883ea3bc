"""Flask application exposing the strategy catalogue and tournament runs as JSON."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict

from flask import Flask, jsonify, request

from .config import DEFAULT_ROUNDS
from .tournament import list_available_strategies, run_tournament

logger = logging.getLogger(__name__)

DEFAULT_WEB_MATCHES = 10
MAX_WEB_ROUNDS = 1000
MAX_WEB_MATCHES = 100


def _bounded(value: int, limit: int, label: str) -> int:
    if value > limit:
        raise ValueError(f"{label} must be at most {limit}, got {value}")
    return value


def _names(value: Any, label: str):
    if value in (None, "", []):
        return None
    if not isinstance(value, list):
        raise TypeError(f"{label} must be a list of strategy names")
    return value


def create_app() -> Flask:
    app = Flask(__name__)

    @app.get("/api/strategies")
    def api_strategies():
        return jsonify({"strategies": list_available_strategies()})

    @app.post("/api/run")
    def api_run():
        payload: Dict[str, Any] = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            rounds = _bounded(int(payload.get("rounds", DEFAULT_ROUNDS)), MAX_WEB_ROUNDS, "rounds")
            matches = _bounded(int(payload.get("matches", DEFAULT_WEB_MATCHES)), MAX_WEB_MATCHES, "matches")
            seed = payload.get("seed")
            seed = int(seed) if seed not in (None, "") else None

            selected = _names(payload.get("strategies"), "strategies")
            exclude = _names(payload.get("exclude"), "exclude")

            result = run_tournament(
                rounds=rounds,
                repeats=matches,
                seed=seed,
                only=selected,
                exclude=exclude,
                progress=False,
            )
        except (ValueError, TypeError) as exc:
            return jsonify({"error": str(exc)}), 400

        logger.info("Web run finished: %d pairings", len(result.matches))
        return jsonify(result.to_dict())

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
