import math
from typing import Any, Dict
from flask import request, jsonify

def ok(payload: Dict[str, Any], status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": message, "code": code}
    if extra:
        body.update(extra)
    return jsonify(body), status


def query_args() -> Dict[str, str]:
    # Blank values count as missing, same as an absent parameter
    return {
        key: value.strip()
        for key, value in request.args.items()
        if value is not None and value.strip() != ""
    }


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves go up (callers expect this for display)."""
    return int(math.floor(value + 0.5))
