# tests/test_validations.py

import pytest

from taskapp.client.validations import validate, validate_many_fields


def test_valid_task_form():
    assert validate_many_fields("task", {"description": "buy milk", "completed": False}) == []


@pytest.mark.parametrize("description", ["", "   ", "\n\t", None])
def test_description_required(description):
    errors = validate_many_fields("task", {"description": description, "completed": True})
    assert errors == [{"field": "description", "err": "This field is required"}]


def test_missing_description_key():
    assert validate_many_fields("task", {"completed": False})[0]["field"] == "description"


def test_unvalidated_fields_pass():
    assert validate("task", "completed", None) is None


def test_unknown_form_kind():
    with pytest.raises(ValueError):
        validate_many_fields("project", {})
