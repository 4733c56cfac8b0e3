"""Tests for the error taxonomy and its status mapping."""

import pytest

from shortlink.errors import (
    STATUS_CODES,
    MalformedInput,
    NotFound,
    ShortlinkError,
    SlugOccupied,
    StoreUnavailable,
    TooManyRetries,
    error_body,
    status_code_for,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (SlugOccupied(), 409),
        (TooManyRetries(), 408),
        (StoreUnavailable(), 500),
        (MalformedInput("Error parsing json: missing field"), 400),
        (NotFound(), 404),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


def test_every_error_has_a_status():
    assert set(STATUS_CODES) == set(ShortlinkError.__subclasses__())


def test_unknown_subclass_falls_back_to_parent():
    class Occupied(SlugOccupied):
        pass

    assert status_code_for(Occupied()) == 409
    assert status_code_for(ShortlinkError()) == 500


def test_error_body_uses_default_message():
    assert error_body(SlugOccupied()) == {"message": "This slug is already in use."}
    assert error_body(NotFound()) == {"message": "Shortened URL not found."}


def test_error_body_uses_custom_message():
    error = MalformedInput("Error parsing json: url is required")

    assert error_body(error) == {"message": "Error parsing json: url is required"}
    assert str(error) == "Error parsing json: url is required"
