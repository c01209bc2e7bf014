from __future__ import annotations

import pytest

from errors import MappingError
from models.user import User


def test_from_row_looks_columns_up_by_name() -> None:
    row = {"username": "ab", "id": 7, "last_name": "B", "email": "a@x.com", "first_name": "A"}

    user = User.from_row(row)

    assert user == User(email="a@x.com", first_name="A", last_name="B", username="ab", id=7)


def test_from_row_keeps_empty_strings() -> None:
    user = User.from_row({"id": 1, "email": "", "first_name": "", "last_name": "", "username": ""})
    assert user.params() == {"email": "", "first_name": "", "last_name": "", "username": ""}


def test_from_row_rejects_missing_column() -> None:
    with pytest.raises(MappingError, match="username"):
        User.from_row({"id": 1, "email": "a@x.com", "first_name": "A", "last_name": "B"})


def test_from_row_rejects_wrong_types() -> None:
    with pytest.raises(MappingError, match="first_name"):
        User.from_row({"id": 1, "email": "a@x.com", "first_name": 5, "last_name": "B", "username": "ab"})
    with pytest.raises(MappingError, match="id"):
        User.from_row({"id": "1", "email": "a@x.com", "first_name": "A", "last_name": "B", "username": "ab"})


def test_field_order_drives_column_list_and_params() -> None:
    user = User(email="a@x.com", first_name="A", last_name="B", username="ab")

    assert User.sql_table_fields() == "id, email, first_name, last_name, username"
    assert list(user.params()) == list(User.FIELDS)
    assert user.to_dict() == {
        "id": None,
        "email": "a@x.com",
        "first_name": "A",
        "last_name": "B",
        "username": "ab",
    }


def test_user_is_immutable() -> None:
    user = User(email="a@x.com", first_name="A", last_name="B", username="ab", id=1)
    with pytest.raises(AttributeError):
        user.email = "other@x.com"  # type: ignore[misc]


def test_from_row_requires_id() -> None:
    with pytest.raises(MappingError, match="'id'"):
        User.from_row({"email": "a@x.com", "first_name": "A", "last_name": "B", "username": "ab"})
    with pytest.raises(MappingError, match="'id'"):
        User.from_row({"id": None, "email": "a@x.com", "first_name": "A", "last_name": "B", "username": "ab"})
