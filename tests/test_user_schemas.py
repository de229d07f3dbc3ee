"""
Test request/response models
Field rules and the messages they report.
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from orderly.modules.users.domain.user import User
from orderly.modules.users.schemas import CreateUserRequest, UpdateUserRequest, UserDetail


def first_message(exc_info):
    return exc_info.value.errors()[0]["msg"]


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"email": "ada@lovelace.io"}, "Name is Required"),
        ({"name": "   ", "email": "ada@lovelace.io"}, "Name is Required"),
        ({"name": "Ada"}, "Email is Required"),
        ({"name": "Ada", "email": ""}, "Email is Required"),
        ({"name": "Ada", "email": "not-an-email"}, "Email is invalid"),
        ({"name": "Ada", "email": "ada@"}, "Email is invalid"),
        ({"name": "Ada", "email": "ada@lovelace@io"}, "Email is invalid"),
    ],
)
def test_create_request_rejects(payload, message):
    with pytest.raises(ValidationError) as exc_info:
        CreateUserRequest(**payload)
    assert first_message(exc_info) == message


def test_create_request_reports_name_before_email():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserRequest(name="", email="bad")
    errors = exc_info.value.errors()
    assert [e["msg"] for e in errors] == ["Name is Required", "Email is invalid"]


def test_create_request_keeps_email_as_submitted():
    request = CreateUserRequest(name="Ada", email="Ada.Lovelace@Lovelace.io")
    assert request.email == "Ada.Lovelace@Lovelace.io"


def test_update_request_id_is_optional():
    request = UpdateUserRequest(name="Ada")
    assert request.id is None


def test_update_request_requires_name():
    with pytest.raises(ValidationError) as exc_info:
        UpdateUserRequest(id=1, name="")
    assert first_message(exc_info) == "Name is Required"


def test_user_detail_uses_camel_case_keys():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    user = User(id=7, name="Ada", email="ada@lovelace.io", created_at=stamp, updated_at=stamp)

    dumped = UserDetail.from_user(user).model_dump(by_alias=True)

    assert dumped == {
        "id": 7,
        "name": "Ada",
        "email": "ada@lovelace.io",
        "createdAt": stamp,
        "updatedAt": stamp,
    }


@pytest.mark.parametrize(
    "email",
    ["dev@localhost", "ops@intranet", "root@build.local", "admin@[127.0.0.1]"],
)
def test_create_request_accepts_local_addresses(email):
    """Only the address format is checked, not whether it is publicly deliverable."""
    request = CreateUserRequest(name="Dev", email=email)
    assert request.email == email


@pytest.mark.parametrize("user_id", [0, -1, 2**63])
def test_update_request_rejects_out_of_range_id(user_id):
    with pytest.raises(ValidationError):
        UpdateUserRequest(id=user_id, name="Ada")


def test_update_request_accepts_largest_id():
    assert UpdateUserRequest(id=2**63 - 1, name="Ada").id == 2**63 - 1
