# capacita_app/services/enrollment.py
# -*- coding: utf-8 -*-
"""
Visão consolidada de uma inscrição (somente leitura).

Junta o status da inscrição, o pagamento mais recente e os documentos
ainda não verificados sem que os gerenciadores chamem uns aos outros.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..exceptions import NotFound
from ..extensions import db
from ..models import Document, Payment, Registration, TrainingProgram
from ..models.enums import DocumentStatus, PaymentStatus
from ..sentinels import is_row_id


@dataclass
class EnrollmentOverview:
    registration: Registration
    program: TrainingProgram
    payments: List[Payment] = field(default_factory=list)
    documents: List[Document] = field(default_factory=list)

    @property
    def latest_payment(self) -> Optional[Payment]:
        if not self.payments:
            return None
        return max(self.payments, key=lambda p: (p.created_at, p.id))

    @property
    def outstanding_documents(self) -> List[Document]:
        return [d for d in self.documents if d.status != DocumentStatus.VERIFIED]

    @property
    def is_paid(self) -> bool:
        latest = self.latest_payment
        return latest is not None and latest.payment_status == PaymentStatus.PAID

    @property
    def documents_complete(self) -> bool:
        return bool(self.documents) and not self.outstanding_documents


def _build(reg: Registration) -> EnrollmentOverview:
    payments = (
        Payment.query.filter_by(registration_id=reg.id)
        .order_by(Payment.created_at.asc(), Payment.id.asc())
        .all()
    )
    documents = (
        Document.query.filter_by(registration_id=reg.id)
        .order_by(Document.id.asc())
        .all()
    )
    return EnrollmentOverview(registration=reg, program=reg.program, payments=payments, documents=documents)


def get_enrollment_overview(registration_id: int) -> EnrollmentOverview:
    reg = db.session.get(Registration, registration_id) if is_row_id(registration_id) else None
    if reg is None:
        raise NotFound("Registration", registration_id)
    return _build(reg)


def list_user_enrollments(user_id: int) -> list[EnrollmentOverview]:
    if not is_row_id(user_id):
        return []
    regs = (
        Registration.query.filter_by(user_id=user_id)
        .order_by(Registration.created_at.desc(), Registration.id.desc())
        .all()
    )
    return [_build(r) for r in regs]
