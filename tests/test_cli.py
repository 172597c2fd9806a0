# tests/test_cli.py
from __future__ import annotations

from capacita_app.models import User, UserRole


def test_init_db(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0, result.output
    assert "Tabelas criadas." in result.output


def test_create_admin(app, db_session):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["create-admin", "Boss@Example.com", "secret123", "--name", "Boss"])
    assert result.exit_code == 0, result.output
    assert "Administrador criado" in result.output

    user = db_session.query(User).filter_by(email="boss@example.com").one()
    assert user.role == UserRole.ADMIN
    assert user.full_name == "Boss"
    assert user.check_password("secret123")


def test_create_admin_duplicate_email(app, db_session):
    runner = app.test_cli_runner()
    runner.invoke(args=["create-admin", "dup@example.com", "secret123"])
    result = runner.invoke(args=["create-admin", "dup@example.com", "other456"])
    assert result.exit_code != 0
    assert db_session.query(User).filter_by(email="dup@example.com").count() == 1
