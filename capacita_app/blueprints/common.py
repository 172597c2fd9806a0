# capacita_app/blueprints/common.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import jsonify, request


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def as_json(schema, obj, status: int = 200):
    """Serializa um objeto (ou lista) ORM usando o schema pydantic de saída."""
    if isinstance(obj, list):
        payload = [schema.model_validate(o).model_dump(mode="json") for o in obj]
    else:
        payload = schema.model_validate(obj).model_dump(mode="json")
    return jsonify(payload), status
