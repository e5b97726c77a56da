from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request

from liquid_sort_core.logging_config import setup_logging
from liquid_sort_core.settings import (
    CAPACITY_RANGE,
    COMPLEXITY_RANGE,
    DIFFICULTY_RANGE,
)
from game import (
    Container,
    GameSettings,
    InvalidArgument,
    Move,
    apply_pour,
    deal_from_settings,
    enumerate_moves,
    evaluate,
    is_stuck,
    is_won,
    opening_outcome,
)

logger = logging.getLogger("liquid_sort_core.app")

app = Flask(__name__)


class BadState(ValueError):
    """The posted state could not be turned into containers."""


# ---------- JSON <-> containers ----------

def state_to_json(containers: List[Container], moves: int = 0) -> Dict[str, Any]:
    capacity = containers[0].capacity if containers else 0
    return {
        "capacity": int(capacity),
        "containers": [c.colors() for c in containers],
        "moves": int(moves),
    }


def json_to_state(obj: Any) -> Tuple[List[Container], int]:
    """Returns (containers, moves). Raises BadState for anything malformed."""
    if not isinstance(obj, dict):
        raise BadState("state must be an object")
    raw = obj.get("containers")
    if not isinstance(raw, list) or not raw:
        raise BadState("containers must be a non-empty list")
    if not all(isinstance(colors, list) for colors in raw):
        raise BadState("each container must be a list of colors")
    try:
        capacity = int(obj["capacity"])
        moves = int(obj.get("moves", 0))
        containers = [Container.of(capacity, [str(x) for x in colors]) for colors in raw]
    except (KeyError, TypeError, ValueError) as e:
        raise BadState(f"bad state: {e}") from e
    return containers, moves


def move_to_json(m: Move) -> Dict[str, Any]:
    return {"from": m.source, "to": m.target, "quantity": m.quantity, "color": m.color}


def _legal_json(containers: List[Container]) -> List[Dict[str, Any]]:
    return [move_to_json(m) for m in enumerate_moves(containers)]


def _error(message: str, status: int = 400) -> Any:
    return jsonify({"ok": False, "error": message}), status


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise BadState("body must be an object")
    return body


# ---------- Game API ----------

@app.get("/api/settings")
def api_settings() -> Any:
    defaults = GameSettings.from_env()
    return jsonify({
        "ok": True,
        "defaults": {
            "difficulty": defaults.difficulty,
            "complexity": defaults.complexity,
            "capacity": defaults.capacity,
        },
        "ranges": {
            "difficulty": list(DIFFICULTY_RANGE),
            "complexity": list(COMPLEXITY_RANGE),
            "capacity": list(CAPACITY_RANGE),
        },
    })


@app.post("/api/new")
def api_new() -> Any:
    try:
        body = _json_body()
        base = GameSettings.from_env()
        settings = GameSettings(
            difficulty=int(body.get("difficulty", base.difficulty)),
            complexity=int(body.get("complexity", base.complexity)),
            capacity=int(body.get("capacity", base.capacity)),
        ).validate()
        seed = body.get("seed", None)
        if seed is not None:
            seed = int(seed)
    except BadState as e:
        return _error(str(e))
    except (TypeError, ValueError) as e:
        return _error(f"bad settings: {e}")
    containers = deal_from_settings(settings, seed=seed)
    logger.debug("new game: %s seed=%s", settings, seed)
    return jsonify({
        "ok": True,
        "state": state_to_json(containers),
        "legalMoves": _legal_json(containers),
        "outcome": opening_outcome(containers).value,
        "difficultyText": settings.difficulty_text(),
    })


@app.post("/api/legal")
def api_legal() -> Any:
    try:
        body = _json_body()
        containers, _ = json_to_state(body.get("state"))
    except BadState as e:
        return _error(str(e))
    return jsonify({"ok": True, "legalMoves": _legal_json(containers)})


@app.post("/api/pour")
def api_pour() -> Any:
    try:
        body = _json_body()
        containers, moves = json_to_state(body.get("state"))
        source = int(body["source"])
        target = int(body["target"])
    except BadState as e:
        return _error(str(e))
    except (KeyError, TypeError, ValueError) as e:
        return _error(f"source and target required: {e}")

    # a position nobody has poured into yet is only over when already sorted
    before = opening_outcome(containers) if moves == 0 else evaluate(containers)
    if before.is_terminal:
        return jsonify({"ok": False, "error": f"game is already {before.value}", "outcome": before.value}), 409
    try:
        result = apply_pour(containers, source, target)
    except InvalidArgument as e:
        return _error(str(e))
    if result.success:
        moves += 1
    outcome = evaluate(containers) if moves else opening_outcome(containers)
    return jsonify({
        "ok": True,
        "success": result.success,
        "quantity": result.quantity,
        "state": state_to_json(containers, moves),
        "legalMoves": _legal_json(containers),
        "outcome": outcome.value,
    })


@app.post("/api/evaluate")
def api_evaluate() -> Any:
    try:
        body = _json_body()
        containers, _ = json_to_state(body.get("state"))
    except BadState as e:
        return _error(str(e))
    return jsonify({
        "ok": True,
        "outcome": evaluate(containers).value,
        "won": is_won(containers),
        "stuck": is_stuck(containers),
    })


if __name__ == "__main__":
    setup_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
