"""Tests for the shared admin key guard."""

import pytest

from commander.core.config import get_settings
from commander.core.security import is_valid_admin_key
from tests.helpers import ADMIN_KEY, API

PAYLOAD = {"title": "t", "commandText": "c", "platform": "linux"}


class TestIsValidAdminKey:
    def test_exact_match(self):
        assert is_valid_admin_key("s3cret", "s3cret")

    @pytest.mark.parametrize("candidate", ["S3CRET", "s3cret ", " s3cret", "s3cre", ""])
    def test_anything_else_fails(self, candidate):
        assert not is_valid_admin_key(candidate, "s3cret")

    def test_missing_header_fails(self):
        assert not is_valid_admin_key(None, "s3cret")

    def test_unconfigured_key_matches_nothing(self):
        assert not is_valid_admin_key("", "")
        assert not is_valid_admin_key("anything", "")

    def test_non_ascii_keys(self):
        assert is_valid_admin_key("clé", "clé")
        assert not is_valid_admin_key("cle", "clé")


class TestGuardOnEndpoints:
    @pytest.mark.asyncio
    async def test_reads_are_public(self, client):
        response = await client.get(API)

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_writes_refused_when_no_key_configured(self, client_for):
        unkeyed = await client_for(security={"admin_key": ""})

        response = await unkeyed.post(API, json=PAYLOAD, headers={"x-admin-key": ""})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_key_comes_from_app_settings(self, client_for):
        rotated = await client_for(security={"admin_key": "rotated"})

        assert (await rotated.post(API, json=PAYLOAD, headers={"x-admin-key": "rotated"})).status_code == 201
        assert (await rotated.post(API, json=PAYLOAD, headers={"x-admin-key": ADMIN_KEY})).status_code == 401

    @pytest.mark.asyncio
    async def test_custom_header_name_is_honoured(self, client_for):
        custom = await client_for(security={"admin_key_header": "x-catalog-key"})

        page = (await custom.get("/")).text
        assert 'data-key-header="x-catalog-key"' in page

        response = await custom.post(API, json=PAYLOAD, headers={"x-catalog-key": ADMIN_KEY})
        assert response.status_code == 201
        command_id = response.json()["id"]

        response = await custom.delete(f"{API}/{command_id}", headers={"x-admin-key": ADMIN_KEY})
        assert response.status_code == 401

        response = await custom.delete(f"{API}/{command_id}", headers={"x-catalog-key": ADMIN_KEY})
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_env_changes_after_startup_do_not_apply(self, client, monkeypatch):
        monkeypatch.setenv("SECURITY__ADMIN_KEY", "changed-later")
        get_settings.cache_clear()

        response = await client.post(API, json=PAYLOAD, headers={"x-admin-key": ADMIN_KEY})

        assert response.status_code == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["put", "delete"])
    async def test_guard_runs_before_lookup(self, client, method):
        # an unknown id still answers 401, not 404, without the key
        request = getattr(client, method)
        kwargs = {"json": {"title": "x"}} if method == "put" else {}

        response = await request(f"{API}/424242", **kwargs)

        assert response.status_code == 401
