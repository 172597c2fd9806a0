# tests/test_documents_service.py
from __future__ import annotations

from datetime import datetime

import pytest

from capacita_app.exceptions import InvalidRequest, NotFound, ReferenceNotFound
from capacita_app.models import Document, DocumentStatus, Registration, User
from capacita_app.services.documents import (
    create_document, list_pending_documents, update_document_status,
)
from conftest import make_registration, missing_id


def _doc(registration_id, document_type="id_card"):
    return create_document(registration_id, document_type, f"/uploads/{document_type}.pdf", f"{document_type}.pdf")


def _check_verification_invariant(doc):
    verified = doc.status == DocumentStatus.VERIFIED
    assert verified == (doc.verified_by is not None and doc.verified_at is not None)
    if not verified:
        assert doc.verified_by is None and doc.verified_at is None


def test_create_document_starts_pending(db_session, registration):
    doc = _doc(registration.id)
    row = db_session.get(Document, doc.id)
    assert row.status == DocumentStatus.PENDING
    assert row.verified_by is None
    assert row.verified_at is None
    assert row.notes is None
    assert row.file_name == "id_card.pdf"


def test_create_document_missing_registration(db_session):
    with pytest.raises(ReferenceNotFound):
        _doc(missing_id(Registration))
    assert db_session.query(Document).count() == 0


def test_verify_then_reset_to_pending(db_session, registration, admin):
    # cenário C
    doc = _doc(registration.id)

    verified = update_document_status(doc.id, "verified", verified_by=admin.id, notes="ok")
    assert verified.status == DocumentStatus.VERIFIED
    assert verified.verified_by == admin.id
    assert isinstance(verified.verified_at, datetime)
    assert verified.notes == "ok"
    _check_verification_invariant(verified)

    reset = update_document_status(doc.id, "pending", verified_by=admin.id)
    assert reset.status == DocumentStatus.PENDING
    assert reset.verified_by is None
    assert reset.verified_at is None
    _check_verification_invariant(reset)


def test_rejected_discards_supplied_verifier(db_session, registration, admin):
    doc = _doc(registration.id)
    rejected = update_document_status(doc.id, "rejected", verified_by=admin.id, notes="blurry scan")
    assert rejected.verified_by is None
    assert rejected.verified_at is None
    assert rejected.notes == "blurry scan"


def test_rejected_twice_is_idempotent(db_session, registration, admin):
    doc = _doc(registration.id)
    update_document_status(doc.id, "verified", verified_by=admin.id)

    once = update_document_status(doc.id, "rejected", verified_by=admin.id, notes="expired")
    state_once = (once.status, once.verified_by, once.verified_at, once.notes)
    twice = update_document_status(doc.id, "rejected", verified_by=admin.id, notes="expired")
    state_twice = (twice.status, twice.verified_by, twice.verified_at, twice.notes)

    assert state_once == state_twice == (DocumentStatus.REJECTED, None, None, "expired")


def test_verified_requires_verifier(db_session, registration):
    doc = _doc(registration.id)
    with pytest.raises(InvalidRequest):
        update_document_status(doc.id, "verified", verified_by=None)
    assert db_session.get(Document, doc.id).status == DocumentStatus.PENDING


def test_verified_with_unknown_verifier(db_session, registration):
    doc = _doc(registration.id)
    with pytest.raises(ReferenceNotFound):
        update_document_status(doc.id, "verified", verified_by=missing_id(User))
    row = db_session.get(Document, doc.id)
    assert row.status == DocumentStatus.PENDING
    assert row.verified_by is None


def test_non_admin_verifier_is_accepted(db_session, registration, student):
    doc = _doc(registration.id)
    verified = update_document_status(doc.id, "verified", verified_by=student.id)
    assert verified.verified_by == student.id


def test_update_missing_document_is_not_found(db_session, registration, admin):
    doc = _doc(registration.id)
    with pytest.raises(NotFound):
        update_document_status(missing_id(Document), "verified", verified_by=admin.id)
    row = db_session.get(Document, doc.id)
    assert row.status == DocumentStatus.PENDING
    assert db_session.query(Document).count() == 1


def test_pending_documents_across_registrations(db_session, admin):
    # cenário E
    reg1 = make_registration()
    reg2 = make_registration()
    pending1 = _doc(reg1.id, "id_card")
    verified = _doc(reg1.id, "diploma")
    rejected = _doc(reg2.id, "photo")
    pending2 = _doc(reg2.id, "transcript")

    update_document_status(verified.id, "verified", verified_by=admin.id)
    update_document_status(rejected.id, "rejected")

    pending = list_pending_documents()
    assert {d.id for d in pending} == {pending1.id, pending2.id}
    assert all(d.status == DocumentStatus.PENDING for d in pending)


def test_invariant_holds_after_sequence(db_session, registration, admin):
    doc = _doc(registration.id)
    for status in ["verified", "rejected", "verified", "pending", "verified"]:
        result = update_document_status(doc.id, status, verified_by=admin.id)
        _check_verification_invariant(result)
    for row in db_session.query(Document).all():
        _check_verification_invariant(row)
