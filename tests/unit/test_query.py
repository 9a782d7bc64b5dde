"""Unit tests for include/exclude resolution."""

import pytest

from restcraft.api.query import resolve_include_media
from restcraft.exceptions import ValidationError


@pytest.mark.parametrize(
    "include, exclude, expected",
    [
        (None, None, True),
        ("", "", True),
        ("media", None, True),
        (None, "media", False),
        (None, " media , ", False),
    ],
)
def test_resolve_include_media(include, exclude, expected):
    assert resolve_include_media(include, exclude) is expected


def test_contradiction_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        resolve_include_media("media", "media")
    assert exc_info.value.parameter == "include"
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("include, exclude, parameter", [("comments", None, "include"), (None, "media,tags", "exclude")])
def test_unknown_relation_is_rejected(include, exclude, parameter):
    with pytest.raises(ValidationError) as exc_info:
        resolve_include_media(include, exclude)
    assert exc_info.value.parameter == parameter
    assert exc_info.value.pointer is None
