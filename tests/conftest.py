# tests/conftest.py
# -*- coding: utf-8 -*-
import os
import sys
import uuid
import pathlib
import tempfile
from datetime import datetime, timezone
from decimal import Decimal

import pytest


# =====================================================================================
# Localização do projeto (garante que "capacita_app" e "config" estejam no sys.path)
# =====================================================================================
def _add_project_root():
    here = pathlib.Path(__file__).resolve()
    for candidate in [here.parent.parent, pathlib.Path.cwd()]:
        if (candidate / "capacita_app").is_dir():
            if str(candidate) not in sys.path:
                sys.path.insert(0, str(candidate))
            return candidate
    return None


PROJECT_ROOT = _add_project_root()


# =====================================================================================
# Ambiente de testes unitários (sem serviços externos)
# =====================================================================================
@pytest.fixture(autouse=True, scope="session")
def _testing_env():
    os.environ["APP_ENV"] = "testing"
    os.environ["FLASK_ENV"] = "testing"
    os.environ["TESTING"] = "1"
    os.environ.setdefault("SECRET_KEY", "testing-secret")
    yield


# =====================================================================================
# App Flask com SQLite temporário e schema criado uma vez por sessão
# =====================================================================================
@pytest.fixture(scope="session")
def app(_testing_env):
    fd, db_path = tempfile.mkstemp(prefix="capacita_test_", suffix=".sqlite")
    os.close(fd)

    from config import TestingConfig
    from capacita_app import create_app
    from capacita_app.extensions import db

    app = create_app(TestingConfig, overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}"})
    with app.app_context():
        db.create_all()

    yield app

    # teardown
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    try:
        os.remove(db_path)
    except OSError:
        pass


# =====================================================================================
# Cada teste começa com as tabelas vazias
# =====================================================================================
@pytest.fixture(autouse=True)
def _clean_tables(app):
    yield
    from capacita_app.extensions import db
    with app.app_context():
        db.session.rollback()
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    from capacita_app.extensions import db
    with app.app_context():
        try:
            yield db.session
        finally:
            db.session.rollback()
            db.session.close()


@pytest.fixture
def strict_transitions(app, monkeypatch):
    monkeypatch.setitem(app.config, "STRICT_STATUS_TRANSITIONS", True)
    yield


# =====================================================================================
# Helpers/Factories de modelos
# =====================================================================================
def aware(year, month, day, hour=0, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def make_user(role="student", **overrides):
    from capacita_app.services.catalog import create_user
    data = {
        "email": f"{role}+{uuid.uuid4().hex[:6]}@test.com",
        "password": "password123",
        "full_name": "Test User",
        "phone": "1234567890",
        "address": "123 Test Street",
        "role": role,
    }
    data.update(overrides)
    return create_user(**data)


def make_program(**overrides):
    from capacita_app.services.catalog import create_program
    data = {
        "name": "Test Program",
        "description": "A test training program",
        "duration_hours": 40,
        "price": Decimal("1500.00"),
        "max_participants": 20,
        "start_date": aware(2024, 1, 1),
        "end_date": aware(2024, 1, 31),
        "is_active": True,
    }
    data.update(overrides)
    return create_program(**data)


def make_registration(user=None, program=None, notes=None):
    from capacita_app.services.registrations import create_registration
    user = user or make_user()
    program = program or make_program()
    return create_registration(user.id, program.id, notes)


@pytest.fixture
def student(db_session):
    return make_user("student")


@pytest.fixture
def admin(db_session):
    return make_user("admin", full_name="Admin")


@pytest.fixture
def program(db_session):
    return make_program()


@pytest.fixture
def registration(db_session, student, program):
    return make_registration(student, program)


def missing_id(model):
    """Um id garantidamente inexistente para o modelo."""
    from sqlalchemy import func
    from capacita_app.extensions import db
    current = db.session.query(func.max(model.id)).scalar() or 0
    return current + 999
