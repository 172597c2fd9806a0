# capacita_app/blueprints/catalog.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint

from capacita_app.blueprints.common import as_json, json_body
from capacita_app.decorators import privileged
from capacita_app.schemas import (
    ProgramCreate, ProgramOut, ScheduleCreate, ScheduleOut, UserCreate, UserOut,
)
from capacita_app.services import catalog

bp = Blueprint("catalog", __name__)

@bp.route("/users", methods=["POST"])
def create_user():
    data = UserCreate.model_validate(json_body())
    user = catalog.create_user(**data.model_dump())
    return as_json(UserOut, user, 201)

@bp.route("/programs", methods=["GET"])
def list_programs():
    return as_json(ProgramOut, catalog.list_active_programs())

@bp.route("/programs", methods=["POST"])
@privileged
def create_program():
    data = ProgramCreate.model_validate(json_body())
    program = catalog.create_program(**data.model_dump())
    return as_json(ProgramOut, program, 201)

@bp.route("/programs/<int:program_id>/schedule", methods=["GET"])
def list_schedule(program_id):
    return as_json(ScheduleOut, catalog.list_schedule(program_id))

@bp.route("/programs/<int:program_id>/schedule", methods=["POST"])
@privileged
def create_schedule(program_id):
    data = ScheduleCreate.model_validate(json_body())
    session = catalog.create_schedule(program_id=program_id, **data.model_dump())
    return as_json(ScheduleOut, session, 201)
