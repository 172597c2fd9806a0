# capacita_app/blueprints/payments.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint

from capacita_app.blueprints.common import as_json, json_body
from capacita_app.decorators import privileged
from capacita_app.schemas import PaymentCreate, PaymentOut, PaymentStatusUpdate
from capacita_app.services import payments

bp = Blueprint("payments", __name__, url_prefix="/payments")

@bp.route("", methods=["POST"])
def create_payment():
    data = PaymentCreate.model_validate(json_body())
    payment = payments.create_payment(
        data.registration_id, data.amount, data.payment_method,
        transaction_id=data.transaction_id, notes=data.notes,
    )
    return as_json(PaymentOut, payment, 201)

@bp.route("", methods=["GET"])
@privileged
def list_payments():
    return as_json(PaymentOut, payments.list_payments())

@bp.route("/<int:payment_id>/status", methods=["PATCH", "POST"])
@privileged
def update_status(payment_id):
    data = PaymentStatusUpdate.model_validate(json_body())
    # só repassa os campos que vieram no JSON (ausente != null)
    payment = payments.update_payment_status(payment_id, data.payment_status, **data.changes())
    return as_json(PaymentOut, payment)
