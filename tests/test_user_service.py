"""Tests for UserService list/create semantics."""

from datetime import datetime, timezone

import pytest

from core.utils.api import InternalError, ValidationError


def parse(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def now_ms():
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


class TestListUsers:

    @pytest.mark.asyncio
    async def test_returns_users_and_server_info(self, user_service, sleep):
        data = await user_service.list_users()

        assert [u["name"] for u in data["users"]] == ["Alice", "Bob", "Charlie"]
        assert data["serverInfo"]["environment"] == "test"
        assert data["serverInfo"]["serverLocation"] == "Cloud Run"
        assert data["serverInfo"]["processingTime"] == "500ms"
        assert parse(data["serverInfo"]["timestamp"])
        assert sleep.calls == [500]

    @pytest.mark.asyncio
    async def test_users_use_camel_case_keys(self, user_service):
        data = await user_service.list_users()

        assert set(data["users"][0]) == {"id", "name", "email", "createdAt"}


class TestCreateUser:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, email", [("", "a@x.com"), ("Ann", ""), (None, "a@x.com"), ("Ann", None), (None, None)])
    async def test_missing_fields_rejected_without_side_effect(self, user_service, store, sleep, name, email):
        before = store.count()

        with pytest.raises(ValidationError) as exc:
            await user_service.create_user(name, email)

        assert exc.value.status == 400
        assert exc.value.message == "Name and email are required"
        assert store.count() == before
        assert sleep.calls == []

    @pytest.mark.asyncio
    async def test_creates_user_with_next_id(self, user_service, store, sleep):
        before = store.count()
        started = now_ms()

        data = await user_service.create_user("Dana", "dana@x.com")

        assert data["message"] == "User created successfully"
        assert data["user"]["id"] == before + 1
        assert data["user"]["name"] == "Dana"
        assert data["user"]["email"] == "dana@x.com"
        assert parse(data["user"]["createdAt"]) >= started
        assert data["serverInfo"]["environment"] == "test"
        assert store.count() == before + 1
        assert sleep.calls == [300]

    @pytest.mark.asyncio
    async def test_not_idempotent(self, user_service, store):
        first = await user_service.create_user("Dana", "dana@x.com")
        second = await user_service.create_user("Dana", "dana@x.com")

        assert second["user"]["id"] == first["user"]["id"] + 1
        assert store.count() == 5

    @pytest.mark.asyncio
    async def test_list_reflects_creates_in_order(self, user_service):
        await user_service.create_user("Dana", "dana@x.com")
        await user_service.create_user("Eve", "eve@x.com")

        data = await user_service.list_users()

        assert len(data["users"]) == 5
        assert [u["name"] for u in data["users"]][-2:] == ["Dana", "Eve"]

    @pytest.mark.asyncio
    async def test_unexpected_failure_becomes_internal_error(self, user_service, store, monkeypatch, caplog):
        def boom(name, email):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(store, "append", boom)

        with pytest.raises(InternalError) as exc:
            await user_service.create_user("Dana", "dana@x.com")

        assert exc.value.status == 500
        assert exc.value.message == "Internal server error"
        assert "disk on fire" not in exc.value.message
        assert "Error creating user" in caplog.text
