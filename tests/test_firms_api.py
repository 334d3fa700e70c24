"""Endpoint tests for firm creation, reads and deletion."""

import asyncio
import os

import pytest

from tests.conftest import login, register

pytestmark = pytest.mark.asyncio


def firm_form(**overrides):
    form = {
        "firmName": "Dosa Corner",
        "area": "Indiranagar",
        "category": ["veg"],
        "region": ["south-indian"],
        "offer": "20% off",
    }
    form.update(overrides)
    return form


async def add_firm(client, token, files=None, **overrides):
    return await client.post(
        "/api/v1/firms",
        data=firm_form(**overrides),
        files=files,
        headers={"token": token},
    )


class TestAddFirm:
    async def test_requires_token(self, test_client):
        resp = await test_client.post("/api/v1/firms", data=firm_form())
        assert resp.status_code == 401

    async def test_add_firm_links_vendor(self, test_client, vendor_token):
        resp = await add_firm(test_client, vendor_token)

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Firm added successfully"
        firm = body["data"]
        assert firm["firmName"] == "Dosa Corner"
        assert firm["category"] == ["veg"]
        assert firm["region"] == ["south-indian"]
        assert firm["offer"] == "20% off"
        assert firm["image"] is None

        me = (await test_client.get("/api/v1/vendors/me", headers={"token": vendor_token})).json()
        assert firm["vendorId"] == me["data"]["id"]
        assert [f["id"] for f in me["data"]["firms"]] == [firm["id"]]

    async def test_vendor_firms_keep_creation_order(self, test_client, vendor_token):
        first = (await add_firm(test_client, vendor_token, firmName="First")).json()["data"]
        second = (await add_firm(test_client, vendor_token, firmName="Second")).json()["data"]

        vendors = (await test_client.get("/api/v1/vendors")).json()["data"]
        assert [f["id"] for f in vendors[0]["firms"]] == [first["id"], second["id"]]

    async def test_image_is_stored_and_served(self, test_client, vendor_token, upload_dir, png_bytes):
        resp = await add_firm(
            test_client, vendor_token, files={"image": ("logo.png", png_bytes, "image/png")}
        )

        assert resp.status_code == 200
        image = resp.json()["data"]["image"]
        assert image.endswith("_logo.png")
        assert os.path.exists(os.path.join(upload_dir, image))

        served = await test_client.get(f"/uploads/{image}")
        assert served.status_code == 200
        assert served.content == png_bytes

    async def test_unsupported_image_type(self, test_client, vendor_token):
        resp = await add_firm(
            test_client, vendor_token, files={"image": ("menu.pdf", b"%PDF-1.4", "application/pdf")}
        )
        assert resp.status_code == 415

    async def test_tags_deduplicated_in_order(self, test_client, vendor_token):
        resp = await add_firm(
            test_client,
            vendor_token,
            category=["non-veg", "veg", "non-veg"],
            region=["chinese", "bakery", "chinese"],
        )

        firm = resp.json()["data"]
        assert firm["category"] == ["non-veg", "veg"]
        assert firm["region"] == ["chinese", "bakery"]

    async def test_unknown_category_rejected(self, test_client, vendor_token):
        resp = await add_firm(test_client, vendor_token, category=["vegan"])
        assert resp.status_code == 422

    async def test_unknown_region_rejected(self, test_client, vendor_token):
        resp = await add_firm(test_client, vendor_token, region=["italian"])
        assert resp.status_code == 422

    async def test_blank_name_rejected(self, test_client, vendor_token):
        resp = await add_firm(test_client, vendor_token, firmName="   ")

        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_duplicate_name_conflicts(self, test_client, vendor_token):
        await add_firm(test_client, vendor_token)
        resp = await add_firm(test_client, vendor_token)
        assert resp.status_code == 409


class TestFirmReadsAndDelete:
    async def test_get_and_list_firms(self, test_client, vendor_token):
        firm = (await add_firm(test_client, vendor_token)).json()["data"]

        got = await test_client.get(f"/api/v1/firms/{firm['id']}")
        assert got.status_code == 200
        assert got.json()["data"]["firmName"] == "Dosa Corner"

        listed = await test_client.get("/api/v1/firms", params={"vendorId": firm["vendorId"]})
        assert [f["id"] for f in listed.json()["data"]] == [firm["id"]]

        other = await test_client.get("/api/v1/firms", params={"vendorId": "someone-else"})
        assert other.json()["data"] == []

    async def test_get_unknown_firm(self, test_client):
        resp = await test_client.get("/api/v1/firms/missing")
        assert resp.status_code == 404

    async def test_owner_deletes_firm_and_image(self, test_client, vendor_token, upload_dir, png_bytes):
        firm = (
            await add_firm(test_client, vendor_token, files={"image": ("logo.png", png_bytes, "image/png")})
        ).json()["data"]

        resp = await test_client.delete(f"/api/v1/firms/{firm['id']}", headers={"token": vendor_token})

        assert resp.status_code == 204
        assert not os.path.exists(os.path.join(upload_dir, firm["image"]))
        assert (await test_client.get(f"/api/v1/firms/{firm['id']}")).status_code == 404
        me = (await test_client.get("/api/v1/vendors/me", headers={"token": vendor_token})).json()
        assert me["data"]["firms"] == []

    async def test_deleted_name_can_be_reused(self, test_client, vendor_token):
        firm = (await add_firm(test_client, vendor_token)).json()["data"]
        await test_client.delete(f"/api/v1/firms/{firm['id']}", headers={"token": vendor_token})

        resp = await add_firm(test_client, vendor_token)
        assert resp.status_code == 200

    async def test_other_vendor_cannot_delete(self, test_client, vendor_token):
        firm = (await add_firm(test_client, vendor_token)).json()["data"]
        await register(test_client, username="rival", email="rival@example.com")
        rival_token = (await login(test_client, email="rival@example.com")).json()["data"]["token"]

        resp = await test_client.delete(f"/api/v1/firms/{firm['id']}", headers={"token": rival_token})

        assert resp.status_code == 403
        assert (await test_client.get(f"/api/v1/firms/{firm['id']}")).status_code == 200


class TestConcurrentAdds:
    async def test_simultaneous_adds_keep_name_unique(self, test_client, vendor_token):
        results = await asyncio.gather(
            *[add_firm(test_client, vendor_token) for _ in range(5)],
            return_exceptions=True,
        )

        statuses = [r.status_code for r in results if not isinstance(r, Exception)]
        assert statuses.count(200) == 1
        assert all(s == 409 for s in statuses if s != 200)

        listed = (await test_client.get("/api/v1/firms")).json()["data"]
        assert [f["firmName"] for f in listed] == ["Dosa Corner"]


class TestSorting:
    @pytest.mark.parametrize("sort", ["metadata", "registry", "vendor", "nope"])
    async def test_non_column_sort_falls_back(self, test_client, vendor_token, sort):
        await add_firm(test_client, vendor_token)

        resp = await test_client.get("/api/v1/firms", params={"sort": sort})

        assert resp.status_code == 200
        assert len(resp.json()["data"]) == 1

    async def test_sort_by_name(self, test_client, vendor_token):
        for name in ("Bravo", "Alpha", "Charlie"):
            await add_firm(test_client, vendor_token, firmName=name)

        resp = await test_client.get("/api/v1/firms", params={"sort": "firm_name", "order": "asc"})

        assert [f["firmName"] for f in resp.json()["data"]] == ["Alpha", "Bravo", "Charlie"]
