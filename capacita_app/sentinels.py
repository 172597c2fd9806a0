# capacita_app/sentinels.py
# -*- coding: utf-8 -*-
from __future__ import annotations


class _Unset:
    """Campo não informado (diferente de None, que limpa o valor)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()

# maior id aceito por db.Integer (int4 no Postgres)
MAX_ROW_ID = 2**31 - 1


def is_row_id(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_ROW_ID
