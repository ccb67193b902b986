"""Request Schemas — trimming, blank rejection and camelCase aliases."""

from datetime import date

import pytest
from pydantic import ValidationError

from portal.schemas.bookmark import BookmarkCreate, parse_resource_ids
from portal.schemas.payment import PaymentInitialize
from portal.schemas.profile import ProfileUpdate
from portal.schemas.push import PushBroadcast


@pytest.mark.parametrize("raw,expected", [
    (None, []),
    ("", []),
    (" , ,", []),
    ("a,b,c", ["a", "b", "c"]),
    ("a, b,,a", ["a", "b"]),
])
def test_parse_resource_ids(raw, expected):
    assert parse_resource_ids(raw) == expected


def test_bookmark_accepts_camel_case():
    body = BookmarkCreate.model_validate({
        "resourceType": "blog_post",
        "resourceId": "post-1",
        "resourceTitle": "Grace",
        "resourceUrl": "  ",
    })
    assert body.resource_id == "post-1"
    assert body.resource_url is None
    assert body.resource_metadata == {}


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_profile_rejects_blank_name(name):
    with pytest.raises(ValidationError):
        ProfileUpdate(name=name)


def test_profile_trims_and_nulls():
    body = ProfileUpdate(name=" Ada ", phone=" ", bio=" hi ", birthday="")
    assert body.name == "Ada"
    assert body.phone is None
    assert body.bio == "hi"
    assert body.birthday is None
    assert body.image_provided is False


def test_profile_tracks_explicit_image():
    assert ProfileUpdate(name="Ada", image=None).image_provided is True
    assert ProfileUpdate(name="Ada", birthday="1990-04-12").birthday == date(1990, 4, 12)


def test_payment_amount_must_be_positive():
    with pytest.raises(ValidationError):
        PaymentInitialize(email="a@example.com", amount=-1, full_name="A", purpose="Tithe")


def test_broadcast_payload_carries_url_and_type():
    payload = PushBroadcast(
        title="Vigil", body="Friday 10pm", url="/events", type="event",
    ).to_payload()
    assert payload["title"] == "Vigil"
    assert payload["tag"] == "event"
    assert payload["data"] == {"url": "/events", "type": "event"}
