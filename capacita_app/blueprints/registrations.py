# capacita_app/blueprints/registrations.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint

from capacita_app.blueprints.common import as_json, json_body
from capacita_app.decorators import privileged
from capacita_app.schemas import RegistrationCreate, RegistrationOut, RegistrationStatusUpdate
from capacita_app.services import registrations

bp = Blueprint("registrations", __name__)

@bp.route("/registrations", methods=["POST"])
def create_registration():
    data = RegistrationCreate.model_validate(json_body())
    reg = registrations.create_registration(data.user_id, data.program_id, data.notes)
    return as_json(RegistrationOut, reg, 201)

@bp.route("/registrations", methods=["GET"])
@privileged
def list_registrations():
    return as_json(RegistrationOut, registrations.list_registrations())

@bp.route("/users/<int:user_id>/registrations", methods=["GET"])
def user_registrations(user_id):
    return as_json(RegistrationOut, registrations.list_user_registrations(user_id))

@bp.route("/registrations/<int:registration_id>/status", methods=["PATCH", "POST"])
@privileged
def update_status(registration_id):
    data = RegistrationStatusUpdate.model_validate(json_body())
    reg = registrations.update_registration_status(registration_id, data.status, data.notes)
    return as_json(RegistrationOut, reg)
