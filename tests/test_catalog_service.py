# tests/test_catalog_service.py
from __future__ import annotations

from decimal import Decimal

import pytest

from capacita_app.exceptions import InvalidRequest, ReferenceNotFound
from capacita_app.models import TrainingProgram, TrainingSchedule, User, UserRole
from capacita_app.services.catalog import (
    create_program, create_schedule, create_user, list_active_programs, list_schedule,
)
from conftest import aware, make_program, make_user, missing_id


def test_create_user_hashes_password(db_session):
    u = create_user("Student@Example.com", "secret123", "Student", "555-0100")
    assert u.email == "student@example.com"
    assert u.role == UserRole.STUDENT
    assert u.password_hash != "secret123"
    assert u.check_password("secret123")
    assert not u.check_password("wrong")


def test_create_admin_user(db_session):
    u = make_user("admin")
    assert u.is_admin
    assert db_session.get(User, u.id).role == UserRole.ADMIN


def test_duplicate_email_rejected(db_session):
    create_user("dup@example.com", "secret123", "A", "1")
    with pytest.raises(InvalidRequest):
        create_user("dup@example.com", "secret456", "B", "2")
    assert db_session.query(User).count() == 1


def test_program_price_is_exact(db_session):
    program = create_program(
        "Data Analysis", "Pandas and SQL", 24, Decimal("1500.00"), 30,
        aware(2024, 3, 1), aware(2024, 3, 31),
    )
    row = db_session.get(TrainingProgram, program.id)
    assert row.price == Decimal("1500.00")
    assert row.is_active is True


def test_list_active_programs_filters_inactive(db_session):
    active = make_program(name="Active")
    make_program(name="Inactive", is_active=False)
    programs = list_active_programs()
    assert [p.id for p in programs] == [active.id]


def test_schedule_for_program(db_session, program):
    second = create_schedule(program.id, "Day 2", aware(2024, 1, 2), "09:00", "12:00", "Room B", None)
    first = create_schedule(program.id, "Day 1", aware(2024, 1, 1), "09:00", "12:00", "Room A", "slides.pdf")
    other = make_program(name="Other")
    create_schedule(other.id, "Kickoff", aware(2024, 1, 1), "13:00", "14:00")

    sessions = list_schedule(program.id)
    assert [s.id for s in sessions] == [first.id, second.id]
    assert sessions[0].materials == "slides.pdf"
    assert list_schedule(missing_id(TrainingProgram)) == []


def test_schedule_missing_program(db_session):
    with pytest.raises(ReferenceNotFound):
        create_schedule(missing_id(TrainingProgram), "Day 1", aware(2024, 1, 1), "09:00", "12:00")
    assert db_session.query(TrainingSchedule).count() == 0
