# capacita_app/timeutil.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """
    Normaliza para UTC com tzinfo.
    Valores sem fuso (ex.: lidos do SQLite) são tratados como UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
