"""Tests: payload validation for users, movies and login."""

import pytest

from validators import (
    MOVIE_FIELDS,
    USER_FIELDS,
    Mode,
    validate_full,
    validate_movie,
    validate_partial,
    validate_user,
)

FULL_USER = {"email": "a@b.com", "password": "x", "gender": "m", "role": "user"}
FULL_MOVIE = {"title": "Heat", "genres": "Crime", "year": "1995"}


# -- Full validation -----------------------------------------------------------


def test_full_user_payload_is_accepted():
    assert validate_user(Mode.CREATE, FULL_USER) == FULL_USER


@pytest.mark.parametrize("missing", USER_FIELDS)
def test_create_user_rejects_missing_field(missing):
    payload = {k: v for k, v in FULL_USER.items() if k != missing}
    assert validate_user(Mode.CREATE, payload) is None


@pytest.mark.parametrize("missing", MOVIE_FIELDS)
def test_create_movie_rejects_missing_field(missing):
    payload = {k: v for k, v in FULL_MOVIE.items() if k != missing}
    assert validate_movie(Mode.CREATE, payload) is None


def test_create_rejects_empty_string_value():
    assert validate_movie(Mode.CREATE, {**FULL_MOVIE, "title": ""}) is None


def test_full_validation_keeps_values_untouched():
    payload = {**FULL_MOVIE, "title": "  Heat  "}
    assert validate_full(payload, MOVIE_FIELDS)["title"] == "  Heat  "


def test_unrecognized_keys_are_dropped():
    data = validate_movie(Mode.CREATE, {**FULL_MOVIE, "id": 7, "rating": 5})
    assert data == FULL_MOVIE


@pytest.mark.parametrize("payload", [None, [], "title", 3])
def test_non_mapping_payload_is_invalid(payload):
    assert validate_full(payload, MOVIE_FIELDS) is None
    assert validate_partial(payload, MOVIE_FIELDS) is None


# -- Partial validation --------------------------------------------------------


@pytest.mark.parametrize("field", USER_FIELDS)
def test_update_user_accepts_any_single_field(field):
    assert validate_user(Mode.UPDATE, {field: FULL_USER[field]}) == {
        field: FULL_USER[field]
    }


@pytest.mark.parametrize("field", MOVIE_FIELDS)
def test_update_movie_accepts_any_single_field(field):
    assert validate_movie(Mode.UPDATE, {field: FULL_MOVIE[field]}) is not None


def test_update_rejects_payload_without_recognized_field():
    assert validate_user(Mode.UPDATE, {}) is None
    assert validate_user(Mode.UPDATE, {"nickname": "joe"}) is None
    assert validate_movie(Mode.UPDATE, {"title": "", "year": None}) is None


def test_update_drops_null_values():
    assert validate_movie(Mode.UPDATE, {"title": "Heat", "year": None}) == {
        "title": "Heat"
    }


# -- Login validation ----------------------------------------------------------


def test_login_requires_email_and_password():
    assert validate_user(Mode.LOGIN, {"email": "a@b.com", "password": "x"}) == {
        "email": "a@b.com",
        "password": "x",
    }
    assert validate_user(Mode.LOGIN, {"email": "a@b.com"}) is None
    assert validate_user(Mode.LOGIN, {"password": "x"}) is None


def test_login_ignores_profile_fields():
    assert validate_user(Mode.LOGIN, FULL_USER) == {
        "email": "a@b.com",
        "password": "x",
    }


def test_movies_have_no_login_mode():
    with pytest.raises(ValueError):
        validate_movie(Mode.LOGIN, FULL_MOVIE)
