# capacita_app/exceptions.py
# -*- coding: utf-8 -*-
from __future__ import annotations


class EnrollmentError(Exception):
    """Base dos erros do ciclo de vida de inscrições."""

    kind = "EnrollmentError"
    status_code = 400

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": str(self)}


class NotFound(EnrollmentError):
    """A linha alvo de uma atualização não existe."""

    kind = "NotFound"
    status_code = 404

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ReferenceNotFound(EnrollmentError):
    """Uma chave estrangeira exigida na criação aponta para uma linha inexistente."""

    kind = "ReferenceNotFound"
    status_code = 422

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"Referenced {entity} with id {entity_id} does not exist")


class InvalidTransition(EnrollmentError):
    kind = "InvalidTransition"
    status_code = 409

    def __init__(self, entity: str, current, target):
        self.entity = entity
        self.current = current
        self.target = target
        super().__init__(f"{entity} cannot move from '{current}' to '{target}'")


class InvalidRequest(EnrollmentError):
    """Pedido recusado por regra de negócio (e-mail duplicado, verificador ausente)."""

    kind = "InvalidRequest"
    status_code = 400
