# capacita_app/blueprints/documents.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint

from capacita_app.blueprints.common import as_json, json_body
from capacita_app.decorators import privileged
from capacita_app.schemas import DocumentCreate, DocumentOut, DocumentStatusUpdate
from capacita_app.services import documents

bp = Blueprint("documents", __name__, url_prefix="/documents")

@bp.route("", methods=["POST"])
def create_document():
    data = DocumentCreate.model_validate(json_body())
    doc = documents.create_document(**data.model_dump())
    return as_json(DocumentOut, doc, 201)

@bp.route("/pending", methods=["GET"])
@privileged
def pending_documents():
    return as_json(DocumentOut, documents.list_pending_documents())

@bp.route("/<int:document_id>/status", methods=["PATCH", "POST"])
@privileged
def update_status(document_id):
    data = DocumentStatusUpdate.model_validate(json_body())
    doc = documents.update_document_status(document_id, data.status, data.verified_by, data.notes)
    return as_json(DocumentOut, doc)
