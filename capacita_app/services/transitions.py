# capacita_app/services/transitions.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from flask import current_app

from ..exceptions import InvalidTransition
from ..models.enums import DocumentStatus, PaymentStatus, RegistrationStatus

# destino -> conjunto de status de origem permitidos
REGISTRATION_TRANSITIONS = {
    RegistrationStatus.PENDING: frozenset(),
    RegistrationStatus.VERIFIED: frozenset({RegistrationStatus.PENDING}),
    RegistrationStatus.REJECTED: frozenset({RegistrationStatus.PENDING}),
    RegistrationStatus.COMPLETED: frozenset({RegistrationStatus.VERIFIED}),
}

PAYMENT_TRANSITIONS = {
    PaymentStatus.PENDING: frozenset(),
    PaymentStatus.PAID: frozenset({PaymentStatus.PENDING}),
    PaymentStatus.FAILED: frozenset({PaymentStatus.PENDING}),
    PaymentStatus.REFUNDED: frozenset({PaymentStatus.PAID}),
}

DOCUMENT_TRANSITIONS = {
    # reabrir para nova análise
    DocumentStatus.PENDING: frozenset({DocumentStatus.VERIFIED, DocumentStatus.REJECTED}),
    DocumentStatus.VERIFIED: frozenset({DocumentStatus.PENDING}),
    DocumentStatus.REJECTED: frozenset({DocumentStatus.PENDING}),
}


def is_allowed(table, current, target) -> bool:
    if current == target:
        return True
    return current in table.get(target, frozenset())


def strict_mode() -> bool:
    return bool(current_app.config.get("STRICT_STATUS_TRANSITIONS", False))


def check_transition(entity: str, table, current, target) -> None:
    """Só bloqueia quando STRICT_STATUS_TRANSITIONS está ligado."""
    if not strict_mode():
        return
    if not is_allowed(table, current, target):
        current_app.logger.warning("Transição recusada: %s %s -> %s", entity, current, target)
        raise InvalidTransition(entity, current, target)
