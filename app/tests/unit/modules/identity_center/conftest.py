"""Fixtures for identity_center tests."""

from types import SimpleNamespace

import pytest

from modules.identity_center.domain.models import Record
from modules.identity_center.service import IdentityCenterService
from tests.factories.directory import FakeSsoAdmin, make_directory


@pytest.fixture
def records():
    """Factory building Records from (id, display_name) pairs."""

    def _factory(*pairs):
        return [Record(id=record_id, display_name=name) for record_id, name in pairs]

    return _factory


@pytest.fixture
def fake_store():
    """Directory with three groups of 15, 8 and 12 members, 5 per page."""
    return make_directory(page_size=5)


@pytest.fixture
def make_clients(fake_store):
    """Factory building a stand-in for AWSClients."""

    def _factory(store=None, sso_admin=None):
        return SimpleNamespace(
            identitystore=store or fake_store,
            sso_admin=sso_admin or FakeSsoAdmin(),
        )

    return _factory


@pytest.fixture
def make_service(make_settings, make_clients):
    """Factory building an IdentityCenterService over the fake directory."""

    def _factory(store=None, sso_admin=None, **settings_kwargs):
        return IdentityCenterService(
            make_settings(**settings_kwargs),
            clients=make_clients(store=store, sso_admin=sso_admin),
        )

    return _factory
