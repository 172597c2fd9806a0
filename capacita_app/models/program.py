# capacita_app/models/program.py
from __future__ import annotations
from ..extensions import db
from ..timeutil import utcnow

class TrainingProgram(db.Model):
    __tablename__ = "training_programs"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    duration_hours = db.Column(db.Integer, nullable=False)
    # valor exato (Numeric), nunca float
    price = db.Column(db.Numeric(10, 2), nullable=False)
    max_participants = db.Column(db.Integer, nullable=False)
    start_date = db.Column(db.DateTime(timezone=True), nullable=False)
    end_date = db.Column(db.DateTime(timezone=True), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    registrations = db.relationship("Registration", backref="program", lazy="dynamic")

class TrainingSchedule(db.Model):
    __tablename__ = "training_schedules"
    id = db.Column(db.Integer, primary_key=True)
    program_id = db.Column(db.Integer, db.ForeignKey("training_programs.id"), nullable=False, index=True)
    session_title = db.Column(db.String(200), nullable=False)
    session_date = db.Column(db.DateTime(timezone=True), nullable=False)
    start_time = db.Column(db.String(10), nullable=False)   # "09:00"
    end_time = db.Column(db.String(10), nullable=False)
    location = db.Column(db.String(255))
    materials = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    program = db.relationship(
        "TrainingProgram",
        backref=db.backref("schedules", lazy="dynamic", order_by="TrainingSchedule.session_date"),
    )
