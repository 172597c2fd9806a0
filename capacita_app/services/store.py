# capacita_app/services/store.py
# -*- coding: utf-8 -*-
"""
Acesso à base compartilhado pelos gerenciadores de status.

- `require_reference`: valida FK antes do INSERT (ReferenceNotFound)
- `insert`: INSERT + commit; violação de FK vira ReferenceNotFound da referência ausente
- `current_value`: lê uma coluna da linha alvo (NotFound se não existir)
- `update_row`: um único UPDATE ... WHERE id = :id (NotFound se 0 linhas)

Ids fora da faixa de db.Integer nunca chegam ao driver: não podem existir.
"""
from __future__ import annotations

from flask import current_app
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..exceptions import NotFound, ReferenceNotFound
from ..extensions import db
from ..sentinels import is_row_id


def require_reference(model, row_id):
    obj = db.session.get(model, row_id) if is_row_id(row_id) else None
    if obj is None:
        current_app.logger.warning("%s %s inexistente", model.__name__, row_id)
        raise ReferenceNotFound(model.__name__, row_id)
    return obj


def insert(obj, *, references=()):
    """Persiste `obj`. `references` = [(Model, id), ...] checadas se a FK falhar no banco."""
    db.session.add(obj)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        for model, row_id in references:
            if not is_row_id(row_id) or db.session.get(model, row_id) is None:
                current_app.logger.warning("FK violada ao criar %s: %s %s", type(obj).__name__, model.__name__, row_id)
                raise ReferenceNotFound(model.__name__, row_id)
        raise
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Falha ao criar %s", type(obj).__name__)
        raise
    return obj


def current_value(model, column, row_id):
    if not is_row_id(row_id):
        raise NotFound(model.__name__, row_id)
    value = db.session.execute(
        select(column).where(model.id == row_id)
    ).first()
    if value is None:
        raise NotFound(model.__name__, row_id)
    return value[0]


def update_row(model, row_id, values: dict):
    if not is_row_id(row_id):
        current_app.logger.warning("%s %s fora da faixa de ids", model.__name__, row_id)
        raise NotFound(model.__name__, row_id)
    stmt = (
        update(model)
        .where(model.id == row_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.session.execute(stmt)
        if result.rowcount == 0:
            db.session.rollback()
            current_app.logger.warning("%s %s não encontrado para atualização", model.__name__, row_id)
            raise NotFound(model.__name__, row_id)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Falha ao atualizar %s %s", model.__name__, row_id)
        raise
    # commit expira a identity map; o get recarrega a linha gravada
    return db.session.get(model, row_id)
