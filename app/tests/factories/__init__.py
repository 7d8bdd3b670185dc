"""Test data factories for deterministic test data generation."""

from tests.factories.aws import (
    make_aws_groups,
    make_aws_groups_memberships,
    make_aws_users,
    make_pages,
    paged_responder,
)
from tests.factories.directory import (
    FakeIdentityStore,
    FakeSsoAdmin,
    make_directory,
    make_user,
)

__all__ = [
    "FakeIdentityStore",
    "FakeSsoAdmin",
    "make_aws_groups",
    "make_aws_groups_memberships",
    "make_aws_users",
    "make_directory",
    "make_pages",
    "make_user",
    "paged_responder",
]
