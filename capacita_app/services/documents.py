# capacita_app/services/documents.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from flask import current_app

from ..exceptions import InvalidRequest
from ..models import Document, Registration, User
from ..models.enums import DocumentStatus
from ..timeutil import utcnow
from .store import current_value, insert, require_reference, update_row
from .transitions import DOCUMENT_TRANSITIONS, check_transition


def create_document(registration_id: int, document_type: str, file_path: str, file_name: str) -> Document:
    require_reference(Registration, registration_id)

    doc = Document(
        registration_id=registration_id,
        document_type=document_type,
        file_path=file_path,
        file_name=file_name,
        status=DocumentStatus.PENDING,
        verified_by=None,
        verified_at=None,
    )
    insert(doc, references=[(Registration, registration_id)])
    current_app.logger.info("Document %s (%s) enviado para registration %s", doc.id, document_type, registration_id)
    return doc


def list_pending_documents() -> list[Document]:
    return (
        Document.query.filter_by(status=DocumentStatus.PENDING)
        .order_by(Document.created_at.asc(), Document.id.asc())
        .all()
    )


def update_document_status(document_id: int, status, verified_by: int | None = None,
                           notes: str | None = None) -> Document:
    """
    Regra de verificação aplicada em toda chamada, independente do que vier do cliente:
    - verified: verified_by = id informado, verified_at = agora
    - pending/rejected: verified_by e verified_at são limpos (valor informado é descartado)
    """
    target = DocumentStatus(status)
    current = current_value(Document, Document.status, document_id)
    check_transition("Document", DOCUMENT_TRANSITIONS, current, target)

    values = {"status": target, "notes": notes, "updated_at": utcnow()}
    if target is DocumentStatus.VERIFIED:
        if verified_by is None:
            raise InvalidRequest("verified_by is required when status is 'verified'")
        verifier = require_reference(User, verified_by)
        if not verifier.is_admin:
            current_app.logger.warning(
                "Document %s verificado por usuário %s sem papel admin", document_id, verified_by
            )
        values["verified_by"] = verified_by
        values["verified_at"] = utcnow()
    else:
        values["verified_by"] = None
        values["verified_at"] = None

    doc = update_row(Document, document_id, values)
    current_app.logger.info("Document %s -> %s", document_id, target.value)
    return doc
