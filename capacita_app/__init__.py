# capacita_app/__init__.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import os

from flask import Flask, jsonify
from pydantic import ValidationError

from config import Config, TestingConfig, StagingConfig, ProductionConfig
from .exceptions import EnrollmentError
from .extensions import db, bcrypt, migrate, init_extensions, register_cli
from .timeutil import utcnow
from .blueprints.core import bp as core_bp
from .blueprints.catalog import bp as catalog_bp
from .blueprints.registrations import bp as registrations_bp
from .blueprints.payments import bp as payments_bp
from .blueprints.documents import bp as documents_bp
from .blueprints.enrollments import bp as enrollments_bp

_CONFIGS = {
    "testing": TestingConfig,
    "staging": StagingConfig,
    "production": ProductionConfig,
}


def create_app(config_object: type[Config] | None = None, overrides: dict | None = None) -> Flask:
    app = Flask(__name__)

    if config_object is None:
        config_object = _CONFIGS.get(os.getenv("APP_ENV", "").lower(), Config)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Extensões (DB/Bcrypt/Migrate)
    init_extensions(app)
    # importa os modelos para registrar as tabelas no metadata
    from . import models  # noqa: F401
    app.config["STARTED_AT"] = utcnow().strftime("%Y-%m-%d %H:%M:%S UTC")

    # Blueprints
    app.register_blueprint(core_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(registrations_bp)
    app.register_blueprint(payments_bp)
    app.register_blueprint(documents_bp)
    app.register_blueprint(enrollments_bp)
    # CLI (ex.: flask init-db)
    register_cli(app)

    @app.errorhandler(ValidationError)
    def _validation_error(e):
        app.logger.info("Requisição inválida: %s", e.error_count())
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        return jsonify({"error": "ValidationError", "message": "Invalid request", "details": errors}), 400

    @app.errorhandler(EnrollmentError)
    def _enrollment_error(e):
        return jsonify(e.to_dict()), e.status_code

    app.logger.info("Capacita iniciado (env=%s)", app.config.get("FLASK_ENV"))
    return app


__all__ = ["create_app", "db", "bcrypt", "migrate"]
