"""Domain Types — verifies enum values and the admin access predicate.

Tests:
    - has_admin_access is true only for admin and super_admin
    - Unknown or missing roles never grant admin access
    - Enums serialize to their string values
"""

import pytest

from portal.core.domain_types import (
    NotificationType, PushAudience, ResourceType, UserRole, has_admin_access,
)


@pytest.mark.parametrize("role", ["admin", "super_admin", UserRole.ADMIN])
def test_admin_roles_have_access(role):
    assert has_admin_access(role) is True


@pytest.mark.parametrize("role", ["member", "visitor", "ADMIN", "root", "", None])
def test_other_roles_have_no_access(role):
    assert has_admin_access(role) is False


def test_resource_types():
    assert {t.value for t in ResourceType} == {
        "sermon", "audio_message", "video", "blog_post", "other",
    }


def test_enums_are_strings():
    assert UserRole.MEMBER == "member"
    assert NotificationType.PRAYER_REQUEST.value == "prayer_request"
    assert PushAudience("members") is PushAudience.MEMBERS
