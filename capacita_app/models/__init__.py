# capacita_app/models/__init__.py
# -*- coding: utf-8 -*-
from .enums import UserRole, RegistrationStatus, PaymentStatus, PaymentMethod, DocumentStatus
from .user import User
from .program import TrainingProgram, TrainingSchedule
from .registration import Registration
from .payment import Payment
from .document import Document


__all__ = [
    "User",
    "TrainingProgram",
    "TrainingSchedule",
    "Registration",
    "Payment",
    "Document",
    "UserRole",
    "RegistrationStatus",
    "PaymentStatus",
    "PaymentMethod",
    "DocumentStatus",
]
