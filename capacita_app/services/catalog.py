# capacita_app/services/catalog.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from flask import current_app

from ..exceptions import InvalidRequest
from ..extensions import db
from ..models import TrainingProgram, TrainingSchedule, User
from ..models.enums import UserRole
from ..sentinels import is_row_id
from ..timeutil import as_utc
from .payments import to_money
from .store import insert, require_reference


def create_user(email: str, password: str, full_name: str, phone: str,
                address: str | None = None, role=UserRole.STUDENT) -> User:
    email = (email or "").strip().lower()
    if User.query.filter_by(email=email).first():
        raise InvalidRequest(f"E-mail {email} já cadastrado.")

    u = User(email=email, full_name=full_name, phone=phone, address=address, role=UserRole(role))
    u.set_password(password)
    insert(u)
    current_app.logger.info("User %s criado (role=%s)", u.id, u.role.value)
    return u


def create_program(name: str, description: str, duration_hours: int, price, max_participants: int,
                   start_date, end_date, is_active: bool = True) -> TrainingProgram:
    program = TrainingProgram(
        name=name,
        description=description,
        duration_hours=duration_hours,
        price=to_money(price),
        max_participants=max_participants,
        start_date=as_utc(start_date),
        end_date=as_utc(end_date),
        is_active=is_active,
    )
    insert(program)
    current_app.logger.info("TrainingProgram %s criado: %s", program.id, name)
    return program


def list_active_programs() -> list[TrainingProgram]:
    return (
        TrainingProgram.query.filter_by(is_active=True)
        .order_by(TrainingProgram.start_date.asc(), TrainingProgram.name.asc())
        .all()
    )


def create_schedule(program_id: int, session_title: str, session_date, start_time: str, end_time: str,
                    location: str | None = None, materials: str | None = None) -> TrainingSchedule:
    require_reference(TrainingProgram, program_id)
    session = TrainingSchedule(
        program_id=program_id,
        session_title=session_title,
        session_date=as_utc(session_date),
        start_time=start_time,
        end_time=end_time,
        location=location,
        materials=materials,
    )
    insert(session, references=[(TrainingProgram, program_id)])
    return session


def list_schedule(program_id: int) -> list[TrainingSchedule]:
    if not is_row_id(program_id):
        return []
    return (
        db.session.query(TrainingSchedule)
        .filter(TrainingSchedule.program_id == program_id)
        .order_by(TrainingSchedule.session_date.asc(), TrainingSchedule.id.asc())
        .all()
    )
