# capacita_app/blueprints/core.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint, current_app, jsonify
from sqlalchemy import text

from capacita_app.extensions import db
from capacita_app.timeutil import utcnow

bp = Blueprint("core", __name__)

@bp.route("/")
def index():
    return jsonify({
        "service": "Capacita",
        "status": "running",
        "started_at": current_app.config.get("STARTED_AT"),
    })

@bp.route("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
    except Exception:
        current_app.logger.exception("Health check falhou")
        return jsonify({"status": "error", "message": "Database unreachable"}), 503
    return jsonify({"status": "ok", "timestamp": utcnow().isoformat()})
