# capacita_app/services/payments.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from decimal import Decimal

from flask import current_app
from sqlalchemy import func

from ..models import Payment, Registration
from ..models.enums import PaymentMethod, PaymentStatus
from ..sentinels import UNSET
from ..timeutil import as_utc, utcnow
from .store import current_value, insert, require_reference, update_row
from .transitions import PAYMENT_TRANSITIONS, check_transition, strict_mode

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    # float passa por str() para não herdar a representação binária
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENTS)


def create_payment(registration_id: int, amount, payment_method,
                   transaction_id: str | None = None, notes: str | None = None) -> Payment:
    """Valor > 0 é garantido pela camada de schemas, não aqui."""
    require_reference(Registration, registration_id)

    payment = Payment(
        registration_id=registration_id,
        amount=to_money(amount),
        payment_method=PaymentMethod(payment_method),
        payment_status=PaymentStatus.PENDING,
        payment_date=None,
        transaction_id=transaction_id,
        notes=notes,
    )
    insert(payment, references=[(Registration, registration_id)])
    current_app.logger.info(
        "Payment %s criado (registration=%s amount=%s method=%s)",
        payment.id, registration_id, payment.amount, payment.payment_method.value,
    )
    return payment


def list_payments() -> list[Payment]:
    return Payment.query.order_by(Payment.created_at.desc(), Payment.id.desc()).all()


def update_payment_status(payment_id: int, payment_status, payment_date=UNSET,
                          transaction_id=UNSET, notes=UNSET) -> Payment:
    """
    Atualização parcial: campos UNSET ficam como estão, None limpa o campo.
    Ao marcar `paid` sem informar data, grava a data atual se a linha ainda não tiver uma
    (AUTO_STAMP_PAYMENT_DATE).
    """
    target = PaymentStatus(payment_status)
    if strict_mode():
        current = current_value(Payment, Payment.payment_status, payment_id)
        check_transition("Payment", PAYMENT_TRANSITIONS, current, target)

    now = utcnow()
    values = {"payment_status": target, "updated_at": now}
    if payment_date is not UNSET:
        values["payment_date"] = as_utc(payment_date)
    elif target is PaymentStatus.PAID and current_app.config.get("AUTO_STAMP_PAYMENT_DATE", True):
        values["payment_date"] = func.coalesce(Payment.payment_date, now)
    if transaction_id is not UNSET:
        values["transaction_id"] = transaction_id
    if notes is not UNSET:
        values["notes"] = notes

    payment = update_row(Payment, payment_id, values)
    current_app.logger.info("Payment %s -> %s", payment_id, target.value)
    return payment
