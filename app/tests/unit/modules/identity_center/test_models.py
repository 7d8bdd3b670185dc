import dataclasses

import pytest

from modules.identity_center.domain.models import (
    Record,
    group_record,
    membership_record,
    user_record,
)


@pytest.mark.unit
class TestRecordConstructors:
    def test_group_record(self):
        record = group_record({"GroupId": "g1", "DisplayName": "Admins"})

        assert record.id == "g1"
        assert record.display_name == "Admins"
        assert record.get("Description") is None

    def test_user_record_prefers_primary_email(self):
        record = user_record(
            {
                "UserId": "u1",
                "UserName": "alice",
                "Emails": [
                    {"Value": "work@example.com"},
                    {"Value": "alice@example.com", "Primary": True},
                ],
            }
        )

        assert record.get("Email") == "alice@example.com"
        assert record.get("UserName") == "alice"

    def test_user_record_falls_back_to_first_email(self):
        record = user_record({"UserId": "u1", "Emails": [{"Value": "a@example.com"}]})

        assert record.get("Email") == "a@example.com"

    def test_membership_record_uses_member_user_id(self):
        record = membership_record(
            {"MembershipId": "m1", "GroupId": "g1", "MemberId": {"UserId": "u7"}}
        )

        assert record.id == "u7"
        assert record.get("GroupId") == "g1"


@pytest.mark.unit
class TestRecordImmutability:
    @pytest.mark.parametrize(
        "record",
        [
            group_record({"GroupId": "g1", "DisplayName": "Admins"}),
            user_record({"UserId": "u1", "UserName": "alice"}),
            membership_record({"MembershipId": "m1", "MemberId": {"UserId": "u1"}}),
            Record(id="r1"),
        ],
    )
    def test_fields_cannot_be_changed(self, record):
        with pytest.raises(TypeError):
            record.fields["UserName"] = "mallory"

    def test_attributes_cannot_be_reassigned(self):
        record = group_record({"GroupId": "g1"})

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.id = "g2"

    def test_caller_dict_is_copied(self):
        raw_fields = {"UserName": "alice"}
        record = Record(id="u1", fields=raw_fields)

        raw_fields["UserName"] = "mallory"

        assert record.get("UserName") == "alice"

    def test_equality_ignores_mapping_type(self):
        assert Record(id="g1", fields={"Description": None}) == Record(
            id="g1", fields={"Description": None}
        )
