# tests/test_controller.py

from decimal import Decimal

import pytest

from grading.controller import (
    RequestParams, Page, Redirect, ScopedEntityController, classify,
    LIST, ADD, EDIT, DELETE_CONFIRM, DELETE_EXECUTE,
    MSG_ADDED, MSG_UPDATED, MSG_DELETED,
)
from grading.exceptions import ValidationError, NotFoundError, AuthorizationError
from grading.records import GradeScaleRecord
from tests.fakes import FakeRenderer, FakeStore

VALUES = {
    "letter_grade": "B",
    "min_percentage": Decimal("80"),
    "max_percentage": Decimal("89.99"),
    "grade_points": Decimal("3.0"),
    "quality": "Good",
    "sort_order": 2,
}


def make_record(id, sort_order, school_id=1, letter="X"):
    return GradeScaleRecord(
        id=id,
        school_id=school_id,
        letter_grade=letter,
        min_percentage=Decimal("0"),
        max_percentage=Decimal("100"),
        sort_order=sort_order,
    )


@pytest.mark.parametrize("action, confirm, expected", [
    ("", False, LIST),
    ("add", False, ADD),
    ("edit", False, EDIT),
    ("delete", False, DELETE_CONFIRM),
    ("delete", True, DELETE_EXECUTE),
    ("", True, LIST),
])
def test_classify(action, confirm, expected):
    assert classify(RequestParams(action=action, confirm=confirm)) == expected


def test_parse_params():
    params = RequestParams.parse({"action": "delete", "id": "7", "schoolid": "3", "confirm": "1", "sesskey": "abc"})

    assert params == RequestParams(action="delete", id=7, schoolid=3, confirm=True, sesskey="abc")


def test_parse_params_defaults():
    assert RequestParams.parse({}) == RequestParams()


def test_parse_rejects_non_integer_id():
    with pytest.raises(ValidationError):
        RequestParams.parse({"id": "abc"})


def test_parse_rejects_unknown_action():
    with pytest.raises(ValidationError):
        RequestParams.parse({"action": "purge"})


# --- LIST ---

def test_list_without_schools_shows_warning_only(session, renderer):
    controller = ScopedEntityController(FakeStore(), session, renderer, base_url="/m/")

    result = controller.handle(RequestParams())

    assert isinstance(result, Page)
    kind, kwargs = renderer.last
    assert kind == "list"
    assert kwargs["no_schools"] is True


def test_list_without_school_renders_picker_only(controller, renderer):
    controller.handle(RequestParams())

    _, kwargs = renderer.last
    assert "school" not in kwargs
    assert [o["school"].name for o in kwargs["picker"]] == ["Evening Academy", "Professional Career School"]
    assert kwargs["picker"][0]["url"] == "/grading/manage/?schoolid=2"


def test_list_empty_school_has_no_rows(controller, renderer):
    controller.handle(RequestParams(schoolid=1))

    _, kwargs = renderer.last
    assert kwargs["school"].id == 1
    assert kwargs["rows"] == []
    assert kwargs["add_url"] == "/grading/manage/?action=add&schoolid=1"


def test_list_marks_selected_school(controller, renderer):
    controller.handle(RequestParams(schoolid=1))

    _, kwargs = renderer.last
    selected = [o["school"].id for o in kwargs["picker"] if o["selected"]]
    assert selected == [1]


def test_list_orders_by_sort_order_then_id(controller, store, renderer):
    store.add_scale(make_record(10, 3))
    store.add_scale(make_record(20, 1))
    store.add_scale(make_record(30, 2))

    controller.handle(RequestParams(schoolid=1))

    _, kwargs = renderer.last
    assert [row["scale"].id for row in kwargs["rows"]] == [20, 30, 10]


def test_list_ties_broken_by_id(controller, store, renderer):
    store.add_scale(make_record(8, 1))
    store.add_scale(make_record(5, 1))

    controller.handle(RequestParams(schoolid=1))

    _, kwargs = renderer.last
    assert [row["scale"].id for row in kwargs["rows"]] == [5, 8]


def test_list_only_shows_rows_of_school(controller, store, renderer):
    store.add_scale(make_record(1, 0, school_id=1))
    store.add_scale(make_record(2, 0, school_id=2))

    controller.handle(RequestParams(schoolid=2))

    _, kwargs = renderer.last
    assert [row["scale"].id for row in kwargs["rows"]] == [2]


def test_list_delete_link_carries_token(controller, renderer, sample_record):
    controller.handle(RequestParams(schoolid=1))

    _, kwargs = renderer.last
    row = kwargs["rows"][0]
    assert row["edit_url"] == f"/grading/manage/?action=edit&id={sample_record.id}&schoolid=1"
    assert "sesskey=tok123" in row["delete_url"]
    assert "confirm" not in row["delete_url"]


def test_list_unknown_school(controller):
    with pytest.raises(NotFoundError):
        controller.handle(RequestParams(schoolid=99))


# --- ADD ---

def test_add_requires_school(controller):
    with pytest.raises(ValidationError):
        controller.handle(RequestParams(action="add"))


def test_add_unknown_school(controller):
    with pytest.raises(NotFoundError):
        controller.handle(RequestParams(action="add", schoolid=99))


def test_add_displays_empty_form(controller, renderer):
    result = controller.handle(RequestParams(action="add", schoolid=1))

    assert isinstance(result, Page)
    kind, kwargs = renderer.last
    assert kind == "form"
    assert kwargs["editing"] is False
    assert kwargs["action_url"] == "/grading/manage/?action=add&schoolid=1"
    assert renderer.last_initial == {"schoolid": 1, "sesskey": "tok123"}


def test_add_inserts_and_redirects(controller, store, renderer):
    renderer.submit(**VALUES)

    result = controller.handle(RequestParams(action="add", schoolid=1, sesskey="tok123"))

    assert result == Redirect("/grading/manage/?schoolid=1", MSG_ADDED)
    rows = store.list_scales(1)
    assert len(rows) == 1
    row = rows[0]
    assert row.time_created == row.time_modified
    assert row.form_values() == VALUES
    assert row.school_id == 1


def test_add_without_token_does_not_write(controller, store, renderer):
    renderer.submit(**VALUES)

    with pytest.raises(AuthorizationError):
        controller.handle(RequestParams(action="add", schoolid=1))

    assert store.writes == []


def test_add_with_wrong_token_does_not_write(controller, store, renderer):
    renderer.submit(**VALUES)

    with pytest.raises(AuthorizationError):
        controller.handle(RequestParams(action="add", schoolid=1, sesskey="forged"))

    assert store.writes == []


def test_add_cancelled(controller, store, renderer):
    renderer.cancel()

    result = controller.handle(RequestParams(action="add", schoolid=1))

    assert result == Redirect("/grading/manage/?schoolid=1")
    assert result.message == ""
    assert store.writes == []


# --- EDIT ---

def test_edit_requires_id(controller):
    with pytest.raises(ValidationError):
        controller.handle(RequestParams(action="edit", schoolid=1))


def test_edit_unknown_id(controller):
    with pytest.raises(NotFoundError):
        controller.handle(RequestParams(action="edit", id=404))


def test_edit_prefills_form(controller, renderer, sample_record):
    controller.handle(RequestParams(action="edit", id=sample_record.id))

    kind, kwargs = renderer.last
    assert kind == "form"
    assert kwargs["editing"] is True
    assert kwargs["school"].id == 1
    assert renderer.last_initial["letter_grade"] == "A"
    assert renderer.last_initial["schoolid"] == 1


def test_edit_updates_and_redirects(controller, store, renderer, sample_record):
    renderer.submit(**VALUES)

    result = controller.handle(RequestParams(action="edit", id=sample_record.id, sesskey="tok123"))

    assert result == Redirect("/grading/manage/?schoolid=1", MSG_UPDATED)
    row = store.get_scale(sample_record.id)
    assert row.form_values() == VALUES
    assert row.time_modified > row.time_created
    assert store.writes == [("update", sample_record.id)]


def test_edit_never_moves_row_to_other_school(controller, store, renderer, sample_record):
    renderer.submit(**VALUES)

    result = controller.handle(RequestParams(action="edit", id=sample_record.id, schoolid=2, sesskey="tok123"))

    assert store.get_scale(sample_record.id).school_id == 1
    assert result.url == "/grading/manage/?schoolid=1"


def test_add_with_id_edits_existing_row(controller, store, renderer, sample_record):
    renderer.submit(**VALUES)

    controller.handle(RequestParams(action="add", id=sample_record.id, sesskey="tok123"))

    assert store.writes == [("update", sample_record.id)]


def test_edit_without_token_does_not_write(controller, store, renderer, sample_record):
    renderer.submit(**VALUES)

    with pytest.raises(AuthorizationError):
        controller.handle(RequestParams(action="edit", id=sample_record.id))

    assert store.get_scale(sample_record.id).letter_grade == "A"
    assert store.writes == []


def test_edit_cancelled(controller, store, renderer, sample_record):
    renderer.cancel()

    result = controller.handle(RequestParams(action="edit", id=sample_record.id))

    assert result == Redirect("/grading/manage/?schoolid=1")
    assert store.writes == []


def test_concurrent_edits_last_write_wins(store, session, clock, sample_record):
    first, second = FakeRenderer(), FakeRenderer()
    first.submit(**dict(VALUES, letter_grade="A-"))
    second.submit(**dict(VALUES, letter_grade="A+"))
    params = RequestParams(action="edit", id=sample_record.id, sesskey="tok123")

    ScopedEntityController(store, session, first, "/m/", clock=clock).handle(params)
    ScopedEntityController(store, session, second, "/m/", clock=clock).handle(params)

    # no version check: the second writer silently overwrites the first
    assert store.get_scale(sample_record.id).letter_grade == "A+"


def test_update_of_row_deleted_meanwhile(controller, store, renderer, sample_record):
    renderer.submit(**VALUES)
    store.get_scale = lambda scale_id: sample_record
    store.scales.clear()

    with pytest.raises(NotFoundError):
        controller.handle(RequestParams(action="edit", id=sample_record.id, sesskey="tok123"))


# --- DELETE ---

def test_delete_confirm_requires_token_before_lookup(controller, store):
    with pytest.raises(AuthorizationError):
        controller.handle(RequestParams(action="delete", id=404))

    assert store.lookups == []


def test_delete_confirm_does_not_delete(controller, store, renderer, sample_record):
    result = controller.handle(RequestParams(action="delete", id=sample_record.id, schoolid=1, sesskey="tok123"))

    assert isinstance(result, Page)
    kind, kwargs = renderer.last
    assert kind == "confirm"
    assert '"A"' in kwargs["message"]
    assert "confirm=1" in kwargs["confirm_url"]
    assert "sesskey=tok123" in kwargs["confirm_url"]
    assert kwargs["cancel_url"] == "/grading/manage/?schoolid=1"
    assert store.get_scale(sample_record.id) == sample_record
    assert store.writes == []


def test_delete_confirm_unknown_id(controller):
    with pytest.raises(NotFoundError):
        controller.handle(RequestParams(action="delete", id=404, sesskey="tok123"))


def test_delete_execute_removes_row(controller, store, renderer, sample_record):
    result = controller.handle(RequestParams(action="delete", id=sample_record.id, schoolid=1,
                                             confirm=True, sesskey="tok123"))

    assert result == Redirect("/grading/manage/?schoolid=1", MSG_DELETED)
    controller.handle(RequestParams(schoolid=1))
    _, kwargs = renderer.last
    assert kwargs["rows"] == []


def test_delete_execute_missing_row_is_noop(controller):
    result = controller.handle(RequestParams(action="delete", id=404, schoolid=1, confirm=True, sesskey="tok123"))

    assert result == Redirect("/grading/manage/?schoolid=1", MSG_DELETED)


def test_delete_execute_without_token(controller, store, sample_record):
    with pytest.raises(AuthorizationError):
        controller.handle(RequestParams(action="delete", id=sample_record.id, confirm=True))

    assert sample_record.id in store.scales
    assert store.writes == []


def test_delete_requires_id(controller):
    with pytest.raises(ValidationError):
        controller.handle(RequestParams(action="delete", sesskey="tok123"))
