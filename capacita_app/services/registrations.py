# capacita_app/services/registrations.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from flask import current_app

from ..models import Registration, TrainingProgram, User
from ..models.enums import RegistrationStatus
from ..sentinels import is_row_id
from ..timeutil import utcnow
from .store import current_value, insert, require_reference, update_row
from .transitions import REGISTRATION_TRANSITIONS, check_transition, strict_mode


def create_registration(user_id: int, program_id: int, notes: str | None = None) -> Registration:
    """Nova inscrição sempre nasce `pending`; o status nunca vem do chamador."""
    require_reference(User, user_id)
    require_reference(TrainingProgram, program_id)

    now = utcnow()
    reg = Registration(
        user_id=user_id,
        program_id=program_id,
        status=RegistrationStatus.PENDING,
        registration_date=now,
        notes=notes,
    )
    insert(reg, references=[(User, user_id), (TrainingProgram, program_id)])
    current_app.logger.info("Registration %s criada (user=%s program=%s)", reg.id, user_id, program_id)
    return reg


def list_user_registrations(user_id: int) -> list[Registration]:
    if not is_row_id(user_id):
        return []
    return (
        Registration.query.filter_by(user_id=user_id)
        .order_by(Registration.created_at.desc(), Registration.id.desc())
        .all()
    )


def list_registrations() -> list[Registration]:
    return Registration.query.order_by(Registration.created_at.desc(), Registration.id.desc()).all()


def update_registration_status(registration_id: int, status, notes: str | None = None) -> Registration:
    """
    Sobrescreve status e notes. `notes=None` apaga a anotação anterior:
    não existe "manter como está" neste gerenciador.
    """
    target = RegistrationStatus(status)
    if strict_mode():
        current = current_value(Registration, Registration.status, registration_id)
        check_transition("Registration", REGISTRATION_TRANSITIONS, current, target)

    reg = update_row(Registration, registration_id, {
        "status": target,
        "notes": notes,
        "updated_at": utcnow(),
    })
    current_app.logger.info("Registration %s -> %s", registration_id, target.value)
    return reg
