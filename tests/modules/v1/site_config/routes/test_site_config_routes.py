import pytest

from app.api.modules.v1.site_config.seed.settings_seed import seed_site_settings

BASE = "/api/v1"


@pytest.mark.asyncio
async def test_public_site_config_returns_defaults_without_rows(client):
    response = await client.get(f"{BASE}/settings/site-config")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["siteName"] == "MYZUWA"
    assert data["theme"] == "light"
    assert data["footerSettings"]["customLinks"] == []
    assert "adminEmail" not in data


@pytest.mark.asyncio
async def test_public_settings_hide_sensitive_rows(client, test_session):
    await seed_site_settings(test_session)

    response = await client.get(f"{BASE}/settings")

    keys = {row["key"] for row in response.json()["data"]}
    assert "siteName" in keys
    assert "adminEmail" not in keys


@pytest.mark.asyncio
async def test_admin_settings_include_sensitive_rows(client, admin_headers, test_session):
    await seed_site_settings(test_session)

    response = await client.get(f"{BASE}/admin/settings", headers=admin_headers)

    assert response.status_code == 200
    keys = {row["key"] for row in response.json()["data"]}
    assert {"adminEmail", "notificationEmail"} <= keys


@pytest.mark.asyncio
async def test_update_settings_roundtrip(client, admin_headers, test_session):
    await seed_site_settings(test_session)

    response = await client.put(
        f"{BASE}/admin/settings",
        json={
            "settings": [
                {"key": "maintenanceMode", "value": True},
                {"key": "metaKeywords", "value": ["myzuwa", "beta"]},
            ]
        },
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert {row["key"] for row in response.json()["data"]} == {"maintenanceMode", "metaKeywords"}

    config = (await client.get(f"{BASE}/settings/site-config")).json()["data"]
    assert config["maintenanceMode"] is True
    assert config["metaKeywords"] == ["myzuwa", "beta"]


@pytest.mark.asyncio
async def test_update_settings_validation_errors(client, admin_headers, test_session):
    await seed_site_settings(test_session)

    response = await client.put(
        f"{BASE}/admin/settings",
        json={"settings": [{"key": "doesNotExist", "value": "x"}]},
        headers=admin_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"]["details"] == {
        "settings.0.key": ["The selected settings.0.key is invalid."]
    }


@pytest.mark.asyncio
async def test_update_settings_requires_items(client, admin_headers):
    response = await client.put(
        f"{BASE}/admin/settings", json={"settings": []}, headers=admin_headers
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_content_lifecycle(client, admin_headers):
    created = await client.post(
        f"{BASE}/admin/content",
        json={"key": "hero_title", "value": "Be first in line", "category": "hero"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["data"]["key"] == "hero_title"

    duplicate = await client.post(
        f"{BASE}/admin/content", json={"key": "hero_title", "value": "x"}, headers=admin_headers
    )
    assert duplicate.status_code == 422
    assert duplicate.json()["error"]["details"] == {"key": ["The key has already been taken."]}

    updated = await client.put(
        f"{BASE}/admin/content/hero_title", json={"is_active": False}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["is_active"] is False

    public = await client.get(f"{BASE}/content")
    assert public.json()["data"] == []

    admin_view = await client.get(f"{BASE}/admin/content", headers=admin_headers)
    assert [row["key"] for row in admin_view.json()["data"]] == ["hero_title"]


@pytest.mark.asyncio
async def test_update_missing_content(client, admin_headers):
    response = await client.put(
        f"{BASE}/admin/content/nope", json={"value": "x"}, headers=admin_headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/admin/content"),
        ("post", "/admin/content"),
        ("put", "/admin/content/hero_title"),
        ("get", "/admin/settings"),
        ("put", "/admin/settings"),
    ],
)
async def test_admin_site_config_routes_require_token(client, method, path):
    kwargs = {} if method == "get" else {"json": {}}
    response = await getattr(client, method)(f"{BASE}{path}", **kwargs)
    assert response.status_code == 401
