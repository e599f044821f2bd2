"""
Unit tests for request body validation and the error hierarchy.
"""

import pytest

from movielist.api.models.user import UserNew, UserUpdate
from movielist.api.validation import format_errors, validate_body
from movielist.errors import AppError, BadRequestError, ConflictError, NotFoundError


class TestValidateBody:

    def test_valid_new_user(self):
        user = validate_body(UserNew, {
            "username": "alice",
            "password": "password1",
            "firstName": "Alice",
            "lastName": "Liddell",
            "email": "alice@example.com",
        })
        assert user.first_name == "Alice"
        assert user.is_admin is False

    def test_collects_every_error(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_body(UserNew, {"username": "", "email": "x"})
        messages = exc_info.value.message
        fields = {m.split(":")[0] for m in messages}
        assert {"username", "password", "firstName", "lastName", "email"} <= fields

    def test_rejects_non_object(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_body(UserUpdate, [1, 2])
        assert len(exc_info.value.message) == 1

    def test_update_unset_fields(self):
        update = validate_body(UserUpdate, {"lastName": "Smith"})
        assert update.model_dump(exclude_unset=True) == {"last_name": "Smith"}

    def test_no_type_coercion(self):
        """Strings are not read as booleans, numbers are not read as strings."""
        base = {
            "username": "alice",
            "password": "password1",
            "firstName": "Alice",
            "lastName": "Liddell",
            "email": "alice@example.com",
        }
        for bad in ({"isAdmin": "true"}, {"isAdmin": 1}, {"password": 1234567}):
            with pytest.raises(BadRequestError):
                validate_body(UserNew, {**base, **bad})

    def test_update_null_rejected(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_body(UserUpdate, {"firstName": None})
        assert exc_info.value.message[0].startswith("firstName")

    def test_email_display_name_rejected(self):
        with pytest.raises(BadRequestError):
            validate_body(UserUpdate, {"email": "Bob <bob@example.com>"})

    def test_email_domain_normalized(self):
        update = validate_body(UserUpdate, {"email": "bob@Example.COM"})
        assert update.email == "bob@example.com"

    def test_email_length(self):
        with pytest.raises(BadRequestError):
            validate_body(UserUpdate, {"email": "a" * 60 + "@example.com"})


class TestFormatErrors:

    def test_strip_prefix(self):
        errors = [{"loc": ("body", "firstName"), "msg": "Field required"}]
        assert format_errors(errors, strip_prefix="body") == ["firstName: Field required"]

    def test_no_location(self):
        assert format_errors([{"loc": (), "msg": "Bad"}]) == ["Bad"]


class TestErrors:

    def test_status_codes(self):
        assert BadRequestError(["x"]).status_code == 400
        assert NotFoundError().status_code == 404
        assert ConflictError().status_code == 409
        assert AppError().status_code == 500
        assert AppError("teapot", status_code=418).status_code == 418

    def test_message_kept(self):
        err = BadRequestError(["a", "b"])
        assert err.message == ["a", "b"]
