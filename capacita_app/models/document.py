# capacita_app/models/document.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from ..extensions import db
from ..timeutil import utcnow
from .enums import DocumentStatus, sa_enum

class Document(db.Model):
    __tablename__ = "documents"
    id = db.Column(db.Integer, primary_key=True)
    registration_id = db.Column(db.Integer, db.ForeignKey("registrations.id"), index=True, nullable=False)
    document_type = db.Column(db.String(80), nullable=False)   # identidade, diploma, foto, ...
    file_path = db.Column(db.String(512), nullable=False)      # caminho no storage
    file_name = db.Column(db.String(255), nullable=False)
    status = db.Column(
        sa_enum(DocumentStatus, "document_status"),
        nullable=False, default=DocumentStatus.PENDING, index=True,
    )
    # preenchidos apenas quando status == verified
    verified_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    verified_at = db.Column(db.DateTime(timezone=True), nullable=True)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    registration = db.relationship(
        "Registration",
        backref=db.backref("documents", lazy="dynamic", order_by="Document.id"),
    )
    verifier = db.relationship("User", foreign_keys=[verified_by])
