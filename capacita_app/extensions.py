# capacita_app/extensions.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import click
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_migrate import Migrate
from sqlalchemy import event, text


db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()


def _set_sqlite_pragmas(dbapi_conn, _conn_record):
    # SQLite só valida chaves estrangeiras com o PRAGMA ligado em cada conexão
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA busy_timeout=30000")
    cursor.close()


def init_extensions(app):
    # DB/Bcrypt/Migrate
    db.init_app(app)
    bcrypt.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        if db.engine.url.get_backend_name() == "sqlite":
            event.listen(db.engine, "connect", _set_sqlite_pragmas)


def register_cli(app):
    @app.cli.command("init-db")
    def init_db_cmd():
        """Cria as tabelas iniciais (DEV/MVP). Para produção: use flask db upgrade."""
        with app.app_context():
            # sanity check
            db.session.execute(text("SELECT 1"))
            db.create_all()
            print("Tabelas criadas.")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.argument("password")
    @click.option("--name", default="Administrador", help="Nome completo do administrador.")
    @click.option("--phone", default="", help="Telefone de contato.")
    def create_admin_cmd(email, password, name, phone):
        """Cria um usuário com papel de administrador."""
        from .exceptions import InvalidRequest
        from .models.enums import UserRole
        from .services.catalog import create_user

        with app.app_context():
            try:
                user = create_user(
                    email=email, password=password, full_name=name,
                    phone=phone, role=UserRole.ADMIN,
                )
            except InvalidRequest as e:
                raise click.ClickException(str(e))
            print(f"Administrador criado: id={user.id} email={user.email}")
