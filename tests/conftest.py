# tests/conftest.py

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import User
from core.models import School
from grading.controller import ScopedEntityController
from grading.models import GradeScale
from grading.records import GradeScaleRecord
from tests.fakes import FakeStore, FakeSession, FakeRenderer, TickingClock

MANAGE_URL = "/grading/manage/"


@pytest.fixture
def store():
    store = FakeStore()
    store.add_school(1, "Professional Career School")
    store.add_school(2, "Evening Academy")
    return store


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def controller(store, session, renderer, clock):
    return ScopedEntityController(store, session, renderer, base_url=MANAGE_URL, clock=clock)


@pytest.fixture
def sample_record(store, clock):
    created = clock()
    return store.add_scale(GradeScaleRecord(
        school_id=1,
        letter_grade="A",
        min_percentage=Decimal("90"),
        max_percentage=Decimal("100"),
        grade_points=Decimal("4.0"),
        quality="Excellent",
        sort_order=1,
        time_created=created,
        time_modified=created,
    ))


@pytest.fixture
def school(db):
    return School.objects.create(name="Professional Career School")


@pytest.fixture
def other_school(db):
    return School.objects.create(name="Evening Academy")


@pytest.fixture
def make_scale(db):
    def _make(school, letter="A", lo="90", hi="100", points="4.0", sort_order=0, **extra):
        past = timezone.now() - timedelta(days=1)
        return GradeScale.objects.create(
            school=school,
            letter_grade=letter,
            min_percentage=Decimal(lo),
            max_percentage=Decimal(hi),
            grade_points=Decimal(points),
            sort_order=sort_order,
            time_created=past,
            time_modified=past,
            **extra,
        )
    return _make


@pytest.fixture
def registrar(db):
    return User.objects.create_user("registrar", password="pw", role=User.Role.REGISTRAR)


@pytest.fixture
def teacher(db):
    return User.objects.create_user("teacher", password="pw", role=User.Role.TEACHER)


@pytest.fixture
def manager_client(client, registrar):
    client.force_login(registrar)
    return client


@pytest.fixture
def api_client(registrar):
    api = APIClient()
    api.force_authenticate(user=registrar)
    return api
