# capacita_app/models/enums.py
"""Status e papéis usados pelos modelos e pela API."""
from __future__ import annotations

from enum import StrEnum

from ..extensions import db


class UserRole(StrEnum):
    STUDENT = "student"
    ADMIN = "admin"


class RegistrationStatus(StrEnum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
    COMPLETED = "completed"


class PaymentStatus(StrEnum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(StrEnum):
    BANK_TRANSFER = "bank_transfer"
    CREDIT_CARD = "credit_card"
    E_WALLET = "e_wallet"
    CASH = "cash"


class DocumentStatus(StrEnum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


def sa_enum(enum_cls, name: str):
    # persiste o valor ("pending"), não o nome do membro ("PENDING")
    return db.Enum(
        enum_cls,
        name=name,
        native_enum=False,
        validate_strings=True,
        length=20,
        values_callable=lambda e: [m.value for m in e],
    )


__all__ = [
    "UserRole",
    "RegistrationStatus",
    "PaymentStatus",
    "PaymentMethod",
    "DocumentStatus",
    "sa_enum",
]
