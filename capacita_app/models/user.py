# capacita_app/models/user.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from ..extensions import db, bcrypt
from ..timeutil import utcnow
from .enums import UserRole, sa_enum

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(180), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    full_name = db.Column(db.String(180), nullable=False)
    phone = db.Column(db.String(40), nullable=False)
    address = db.Column(db.Text)
    role = db.Column(sa_enum(UserRole, "user_role"), nullable=False, default=UserRole.STUDENT)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    registrations = db.relationship("Registration", backref="user", lazy="dynamic")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def set_password(self, raw: str) -> None:
        self.password_hash = bcrypt.generate_password_hash(raw).decode("utf-8")

    def check_password(self, raw: str) -> bool:
        return bcrypt.check_password_hash(self.password_hash, raw)
