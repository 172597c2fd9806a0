# capacita_app/models/registration.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from ..extensions import db
from ..timeutil import utcnow
from .enums import RegistrationStatus, sa_enum

class Registration(db.Model):
    __tablename__ = "registrations"

    id = db.Column(db.Integer, primary_key=True)
    # sem unique(user_id, program_id): novas tentativas de inscrição são permitidas
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), index=True, nullable=False)
    program_id = db.Column(db.Integer, db.ForeignKey("training_programs.id"), index=True, nullable=False)
    status = db.Column(
        sa_enum(RegistrationStatus, "registration_status"),
        nullable=False, default=RegistrationStatus.PENDING, index=True,
    )
    registration_date = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
