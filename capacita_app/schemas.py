# capacita_app/schemas.py
# -*- coding: utf-8 -*-
"""
Contratos de entrada/saída da API.

Valores monetários são Decimal (serializados como string no JSON) e datas
saem sempre com fuso (UTC).
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator, AwareDatetime, BaseModel, ConfigDict, EmailStr, Field,
    PositiveInt, model_validator,
)

from .models.enums import DocumentStatus, PaymentMethod, PaymentStatus, RegistrationStatus, UserRole
from .sentinels import MAX_ROW_ID, UNSET
from .timeutil import as_utc

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
PositiveMoney = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
NonNegativeMoney = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
RowId = Annotated[int, Field(gt=0, le=MAX_ROW_ID)]


class _In(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class _Out(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ——— Users ———

class UserCreate(_In):
    email: EmailStr
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)
    phone: str
    address: Optional[str] = None
    role: UserRole = UserRole.STUDENT


class UserOut(_Out):
    id: int
    email: str
    full_name: str
    phone: str
    address: Optional[str] = None
    role: UserRole
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ——— Programs / schedule ———

class ProgramCreate(_In):
    name: str = Field(min_length=1)
    description: str
    duration_hours: PositiveInt
    price: NonNegativeMoney
    max_participants: PositiveInt
    start_date: AwareDatetime
    end_date: AwareDatetime
    is_active: bool = True


class ProgramOut(_Out):
    id: int
    name: str
    description: str
    duration_hours: int
    price: Decimal
    max_participants: int
    start_date: UtcDatetime
    end_date: UtcDatetime
    is_active: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ScheduleCreate(_In):
    # program_id vem só da URL
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    session_title: str = Field(min_length=1)
    session_date: AwareDatetime
    start_time: str
    end_time: str
    location: Optional[str] = None
    materials: Optional[str] = None


class ScheduleOut(_Out):
    id: int
    program_id: int
    session_title: str
    session_date: UtcDatetime
    start_time: str
    end_time: str
    location: Optional[str] = None
    materials: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ——— Registrations ———

class RegistrationCreate(_In):
    user_id: RowId
    program_id: RowId
    notes: Optional[str] = None


class RegistrationStatusUpdate(_In):
    status: RegistrationStatus
    notes: Optional[str] = None


class RegistrationOut(_Out):
    id: int
    user_id: int
    program_id: int
    status: RegistrationStatus
    registration_date: UtcDatetime
    notes: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ——— Payments ———

class PaymentCreate(_In):
    registration_id: RowId
    amount: PositiveMoney
    payment_method: PaymentMethod
    transaction_id: Optional[str] = None
    notes: Optional[str] = None


class PaymentStatusUpdate(_In):
    payment_status: PaymentStatus
    payment_date: Optional[AwareDatetime] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None

    def changes(self) -> dict:
        """
        Campos opcionais como kwargs do serviço: ausente no JSON -> UNSET,
        `null` explícito -> None.
        """
        sent = self.model_fields_set
        return {
            name: (getattr(self, name) if name in sent else UNSET)
            for name in ("payment_date", "transaction_id", "notes")
        }


class PaymentOut(_Out):
    id: int
    registration_id: int
    amount: Decimal
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    payment_date: Optional[UtcDatetime] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ——— Documents ———

class DocumentCreate(_In):
    registration_id: RowId
    document_type: str = Field(min_length=1)
    file_path: str = Field(min_length=1)
    file_name: str = Field(min_length=1)


class DocumentStatusUpdate(_In):
    status: DocumentStatus
    verified_by: Optional[RowId] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _verifier_required(self):
        if self.status == DocumentStatus.VERIFIED and self.verified_by is None:
            raise ValueError("verified_by is required when status is 'verified'")
        return self


class DocumentOut(_Out):
    id: int
    registration_id: int
    document_type: str
    file_path: str
    file_name: str
    status: DocumentStatus
    verified_by: Optional[int] = None
    verified_at: Optional[UtcDatetime] = None
    notes: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


# ——— Visão consolidada ———

class EnrollmentOverviewOut(_Out):
    registration: RegistrationOut
    program: ProgramOut
    latest_payment: Optional[PaymentOut] = None
    payments: List[PaymentOut]
    outstanding_documents: List[DocumentOut]
    is_paid: bool
    documents_complete: bool
