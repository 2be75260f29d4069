"""End-to-end tests: API mutations survive an application restart."""

import pytest
from fastapi.testclient import TestClient

from weekmenu.api.app import create_app
from weekmenu.api.runtime import ApiState
from weekmenu.config import Settings


@pytest.fixture
def make_client(tmp_path):
    """Build a client whose application persists into ``tmp_path``."""

    def factory() -> ApiState:
        return ApiState(settings=Settings(data_dir=tmp_path, random_seed="integration"))

    def _make() -> TestClient:
        return TestClient(create_app(state_factory=factory))

    return _make


def test_state_survives_restart(make_client):
    with make_client() as client:
        client.patch("/tags/素菜", json={"name": "蔬食"})
        client.patch("/days/2", json={"locked": True, "note": "回家吃"})
        client.post("/menu/generate")
        before = client.get("/menu").json()["state"]

    with make_client() as client:
        after = client.get("/menu").json()["state"]

    assert after == before
    assert after["weeklyMenu"][2]["locked"] is True
    assert after["weeklyMenu"][2]["note"] == "回家吃"


def test_legacy_file_is_upgraded_on_start(make_client, tmp_path):
    (tmp_path / "menu-storage.json").write_text(
        '{"state": {"dishes": {"大荤": ["红烧肉"]}, "tags": ["大荤"],'
        ' "weeklyMenu": [{"day": "周一", "items": {"大荤": "红烧肉"}}]}, "version": 0}',
        encoding="utf-8",
    )

    with make_client() as client:
        state = client.get("/menu").json()["state"]
        assert state["dishes"][0]["name"] == "红烧肉"
        assert state["weeklyMenu"][0]["entries"][0]["dishName"] == "红烧肉"

        response = client.post("/menu/generate")
        assert response.json()["state"]["weeklyMenu"][0]["entries"][0]["dishName"] == "红烧肉"
        client.patch("/days/0", json={"note": "周末采购"})

    stored = (tmp_path / "menu-storage.json").read_text(encoding="utf-8")
    assert '"weeklyMenu"' in stored
    assert '"version"' not in stored


def test_corrupt_file_falls_back_to_defaults(make_client, tmp_path):
    (tmp_path / "menu-storage.json").write_text("{{{", encoding="utf-8")

    with make_client() as client:
        state = client.get("/menu").json()["state"]

    assert [day["day"] for day in state["weeklyMenu"]] == ["周一", "周二", "周三", "周四", "周五"]
