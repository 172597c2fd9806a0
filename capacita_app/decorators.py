# capacita_app/decorators.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from functools import wraps
from flask import current_app, jsonify, request

def privileged(view_func):
    """
    Marca operações de administrador. A autorização em si é externa:
    se houver um callable em app.extensions["authorizer"], ele decide
    (recebe o request, devolve bool). Sem authorizer, nada é bloqueado.
    """
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        authorizer = current_app.extensions.get("authorizer")
        if authorizer is not None and not authorizer(request):
            current_app.logger.warning("Acesso negado: %s %s", request.method, request.path)
            return jsonify({"error": "Forbidden", "message": "Acesso restrito ao administrador."}), 403
        return view_func(*args, **kwargs)
    return wrapper
