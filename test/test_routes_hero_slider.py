"""
Tests for hero slider routes

Covers the admin CRUD endpoints, optimistic version checks and the public
listing with and without a locale.
"""

import asyncio

import pytest
from utils.mock_utils import create_test_slider, slider_payload

from app.exceptions import VersionConflictError
from app.services.hero_slider_service import HeroSliderService

ADMIN = "/api/v1/admin/hero-slider"
PUBLIC = "/api/v1/hero-slider"


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_missing_token(self, client):
        response = await client.get(ADMIN)
        assert response.status_code == 401
        assert response.json()["error"]["error_code"] == "AUTH_FAILED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_invalid_token(self, client):
        response = await client.post(ADMIN, json=slider_payload(), headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["error"]["error_code"] == "AUTH_TOKEN_INVALID"


class TestCreateSlider:
    @pytest.mark.asyncio
    async def test_create_slider(self, client, auth_headers):
        response = await client.post(ADMIN, json=slider_payload(), headers=auth_headers)
        assert response.status_code == 201

        slider = response.json()["slider"]
        assert slider["title"] == {"tr": "Başlık", "en": "Title"}
        assert slider["primaryButton"]["en"] == {"text": "Explore", "url": "/en/services"}
        assert slider["order"] == 1
        assert slider["version"] == 1
        assert slider["isActive"] is True
        assert slider["createdById"] == 7

    @pytest.mark.asyncio
    async def test_default_order_appends(self, client, auth_headers):
        await client.post(ADMIN, json=slider_payload(order=4), headers=auth_headers)
        response = await client.post(ADMIN, json=slider_payload(), headers=auth_headers)
        assert response.json()["slider"]["order"] == 5

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, client, auth_headers):
        body = slider_payload(backgroundImage="")
        del body["title"]
        response = await client.post(ADMIN, json=body, headers=auth_headers)
        assert response.status_code == 400

        error = response.json()["error"]
        assert error["error_code"] == "VALIDATION_MISSING_FIELDS"
        assert set(error["details"]["fields"]) == {"title", "backgroundImage"}

    @pytest.mark.asyncio
    async def test_legacy_string_fields_are_stored_as_given(self, client, auth_headers):
        response = await client.post(ADMIN, json=slider_payload(title="Plain title"), headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["slider"]["title"] == "Plain title"

    @pytest.mark.asyncio
    async def test_negative_order_rejected(self, client, auth_headers):
        response = await client.post(ADMIN, json=slider_payload(order=-1), headers=auth_headers)
        assert response.status_code == 422
        assert response.json()["error"]["error_code"] == "VALIDATION_FAILED"


class TestListSliders:
    @pytest.mark.asyncio
    async def test_sorted_by_order(self, client, auth_headers, test_db):
        await create_test_slider(test_db, order=3, title="C")
        await create_test_slider(test_db, order=1, title="A")
        await create_test_slider(test_db, order=2, title="B", is_active=False)

        response = await client.get(ADMIN, headers=auth_headers)
        assert response.status_code == 200

        data = response.json()
        assert [s["title"] for s in data["sliders"]] == ["A", "B", "C"]
        assert data["pagination"] == {"page": 1, "limit": 10, "totalCount": 3, "totalPages": 1}

    @pytest.mark.asyncio
    async def test_active_filter(self, client, auth_headers, test_db):
        await create_test_slider(test_db, order=1, title="A")
        await create_test_slider(test_db, order=2, title="B", is_active=False)

        response = await client.get(ADMIN, params={"isActive": "false"}, headers=auth_headers)
        assert [s["title"] for s in response.json()["sliders"]] == ["B"]

        response = await client.get(ADMIN, params={"isActive": "all"}, headers=auth_headers)
        assert len(response.json()["sliders"]) == 2

    @pytest.mark.asyncio
    async def test_pagination(self, client, auth_headers, test_db):
        for order in range(1, 6):
            await create_test_slider(test_db, order=order, title=f"S{order}")

        response = await client.get(ADMIN, params={"page": 2, "limit": 2}, headers=auth_headers)
        data = response.json()
        assert [s["title"] for s in data["sliders"]] == ["S3", "S4"]
        assert data["pagination"]["totalPages"] == 3

    @pytest.mark.asyncio
    async def test_limit_capped(self, client, auth_headers):
        response = await client.get(ADMIN, params={"limit": 101}, headers=auth_headers)
        assert response.status_code == 422


class TestGetUpdateDelete:
    @pytest.mark.asyncio
    async def test_get_missing_slider(self, client, auth_headers):
        response = await client.get(f"{ADMIN}/999", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_SLIDER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_order_only(self, client, auth_headers, test_db):
        slider = await create_test_slider(test_db, order=1, title={"tr": "Bir", "en": "One"})

        response = await client.put(f"{ADMIN}/{slider.id}", json={"order": 3}, headers=auth_headers)
        assert response.status_code == 200

        updated = response.json()["slider"]
        assert updated["order"] == 3
        assert updated["version"] == 2
        assert updated["title"] == {"tr": "Bir", "en": "One"}
        assert updated["updatedById"] == 7

    @pytest.mark.asyncio
    async def test_update_with_current_version(self, client, auth_headers, test_db):
        slider = await create_test_slider(test_db, order=1)
        response = await client.put(
            f"{ADMIN}/{slider.id}", json={"isActive": False, "version": 1}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["slider"]["isActive"] is False

    @pytest.mark.asyncio
    async def test_stale_version_conflict(self, client, auth_headers, test_db):
        slider = await create_test_slider(test_db, order=1)
        await client.put(f"{ADMIN}/{slider.id}", json={"order": 2, "version": 1}, headers=auth_headers)

        response = await client.put(f"{ADMIN}/{slider.id}", json={"order": 5, "version": 1}, headers=auth_headers)
        assert response.status_code == 409

        error = response.json()["error"]
        assert error["error_code"] == "VERSION_CONFLICT"
        assert error["details"]["current_version"] == 2

        current = await client.get(f"{ADMIN}/{slider.id}", headers=auth_headers)
        assert current.json()["slider"]["order"] == 2

    @pytest.mark.asyncio
    async def test_clearing_required_field_rejected(self, client, auth_headers, test_db):
        slider = await create_test_slider(test_db, order=1)
        response = await client.put(f"{ADMIN}/{slider.id}", json={"backgroundImage": ""}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["backgroundImage"]

    @pytest.mark.asyncio
    async def test_null_for_non_nullable_field_rejected(self, client, auth_headers, test_db):
        slider = await create_test_slider(test_db, order=1)
        for body in ({"order": None}, {"isActive": None}):
            response = await client.put(f"{ADMIN}/{slider.id}", json=body, headers=auth_headers)
            assert response.status_code == 422
            assert response.json()["error"]["error_code"] == "VALIDATION_FAILED"

        current = (await client.get(f"{ADMIN}/{slider.id}", headers=auth_headers)).json()["slider"]
        assert (current["order"], current["isActive"], current["version"]) == (1, True, 1)

    @pytest.mark.asyncio
    async def test_simultaneous_updates_with_same_version(self, client, auth_headers, test_db):
        slider = await create_test_slider(test_db, order=1)
        url = f"{ADMIN}/{slider.id}"

        first, second = await asyncio.gather(
            client.put(url, json={"order": 2, "version": 1}, headers=auth_headers),
            client.put(url, json={"isActive": False, "version": 1}, headers=auth_headers),
        )
        assert sorted([first.status_code, second.status_code]) == [200, 409]

        winner, loser = (first, second) if first.status_code == 200 else (second, first)
        assert loser.json()["error"]["error_code"] == "VERSION_CONFLICT"

        current = (await client.get(url, headers=auth_headers)).json()["slider"]
        assert current["version"] == 2
        winning = winner.json()["slider"]
        assert (current["order"], current["isActive"]) == (winning["order"], winning["isActive"])

    @pytest.mark.asyncio
    async def test_write_after_concurrent_commit_conflicts(self, session_factory, test_db):
        slider = await create_test_slider(test_db, order=1)

        async with session_factory() as stale_db, session_factory() as other_db:
            stale = HeroSliderService(stale_db)
            # Loads version 1 into this session's identity map
            await stale.get_slider(slider.id)
            await HeroSliderService(other_db).update_slider(slider.id, {"order": 4})

            with pytest.raises(VersionConflictError) as exc_info:
                await stale.update_slider(slider.id, {"is_active": False}, expected_version=1)

        assert exc_info.value.details["expected_version"] == 1
        assert exc_info.value.details["current_version"] == 2

    @pytest.mark.asyncio
    async def test_update_missing_slider(self, client, auth_headers):
        response = await client.put(f"{ADMIN}/999", json={"order": 1}, headers=auth_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_keeps_other_orders(self, client, auth_headers, test_db):
        first = await create_test_slider(test_db, order=1, title="A")
        second = await create_test_slider(test_db, order=2, title="B")
        third = await create_test_slider(test_db, order=3, title="C")

        response = await client.delete(f"{ADMIN}/{second.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Hero slider deleted"}

        listing = (await client.get(ADMIN, headers=auth_headers)).json()["sliders"]
        assert [(s["id"], s["order"]) for s in listing] == [(first.id, 1), (third.id, 3)]

        missing = await client.delete(f"{ADMIN}/{second.id}", headers=auth_headers)
        assert missing.status_code == 404


class TestPublicSliders:
    @pytest.mark.asyncio
    async def test_only_active_in_order(self, client, test_db):
        await create_test_slider(test_db, order=2, title="B")
        await create_test_slider(test_db, order=1, title="A")
        await create_test_slider(test_db, order=3, title="Hidden", is_active=False)

        response = await client.get(PUBLIC)
        assert response.status_code == 200

        data = response.json()
        assert [s["title"] for s in data["sliders"]] == ["A", "B"]
        assert data["count"] == 2
        assert data["locale"] is None
        assert "isActive" not in data["sliders"][0]

    @pytest.mark.asyncio
    async def test_default_limit(self, client, test_db):
        for order in range(1, 8):
            await create_test_slider(test_db, order=order)
        response = await client.get(PUBLIC)
        assert response.json()["count"] == 5

    @pytest.mark.asyncio
    async def test_locale_renders_one_language(self, client, test_db):
        await create_test_slider(
            test_db,
            order=1,
            title={"tr": "Merhaba", "en": "Hello"},
            statistics=[{"tr": {"value": "10", "label": "Yıl"}, "en": {"value": "10", "label": "Years"}}],
        )
        data = (await client.get(PUBLIC, params={"locale": "en"})).json()

        slider = data["sliders"][0]
        assert data["locale"] == "en"
        assert slider["title"] == "Hello"
        assert slider["primaryButton"] == {"text": "Go", "url": "/en"}
        assert slider["statistics"] == [{"value": "10", "label": "Years"}]

    @pytest.mark.asyncio
    async def test_empty_language_falls_back_to_default(self, client, test_db):
        await create_test_slider(test_db, order=1, title={"tr": "Merhaba", "en": ""})
        data = (await client.get(PUBLIC, params={"locale": "en-US"})).json()
        assert data["locale"] == "en"
        assert data["sliders"][0]["title"] == "Merhaba"

    @pytest.mark.asyncio
    async def test_unknown_locale_uses_default_language(self, client, test_db):
        await create_test_slider(test_db, order=1, title="Legacy")
        data = (await client.get(PUBLIC, params={"locale": "de"})).json()
        assert data["locale"] == "tr"
        assert data["sliders"][0]["title"] == "Legacy"
        assert data["sliders"][0]["subtitle"] is None
