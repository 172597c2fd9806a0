# capacita_app/blueprints/enrollments.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint

from capacita_app.blueprints.common import as_json
from capacita_app.schemas import EnrollmentOverviewOut
from capacita_app.services import enrollment

bp = Blueprint("enrollments", __name__)

@bp.route("/registrations/<int:registration_id>/overview")
def overview(registration_id):
    return as_json(EnrollmentOverviewOut, enrollment.get_enrollment_overview(registration_id))

@bp.route("/users/<int:user_id>/enrollments")
def user_enrollments(user_id):
    return as_json(EnrollmentOverviewOut, enrollment.list_user_enrollments(user_id))
