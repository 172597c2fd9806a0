# capacita_app/models/payment.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from ..extensions import db
from ..timeutil import utcnow
from .enums import PaymentMethod, PaymentStatus, sa_enum

class Payment(db.Model):
    __tablename__ = "payments"

    id = db.Column(db.Integer, primary_key=True)
    registration_id = db.Column(db.Integer, db.ForeignKey("registrations.id"), index=True, nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    payment_method = db.Column(sa_enum(PaymentMethod, "payment_method"), nullable=False)
    payment_status = db.Column(
        sa_enum(PaymentStatus, "payment_status"),
        nullable=False, default=PaymentStatus.PENDING, index=True,
    )
    payment_date = db.Column(db.DateTime(timezone=True), nullable=True)
    transaction_id = db.Column(db.String(120))
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # várias tentativas por inscrição; nenhuma é marcada como substituída
    registration = db.relationship(
        "Registration",
        backref=db.backref("payments", lazy="dynamic", order_by="Payment.id"),
    )
