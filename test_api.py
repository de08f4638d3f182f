"""
FastAPI 엔드포인트 테스트
"""

import pytest
from fastapi.testclient import TestClient

from conftest import FIXED_NOW, FakeClient, raw_bid
from biddash.database.connection import MemoryCredentialStore
from biddash.main import app
from biddash.models.outcome import DomainError, Success
from biddash.services.dashboard import DashboardController


@pytest.fixture
def fake_client():
    return FakeClient(Success(items=[
        raw_bid(bidNtceNo="A", bidNtceNm="[긴급] 공사 발주", bidClseDate="20240503"),
        raw_bid(bidNtceNo="B", bidNtceNm="일반 용역", bidClseDate="20240420"),
    ]))


@pytest.fixture
def api(fake_client):
    app.state.controller = DashboardController(
        client=fake_client,
        credential_store=MemoryCredentialStore("abcd1234efgh5678"),
        clock=lambda: FIXED_NOW,
    )
    app.state.engine = None
    with TestClient(app) as test_client:
        yield test_client
    app.state.controller = None


class TestDashboardApi:
    """대시보드 API"""

    def test_root(self, api):
        response = api.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "BidDash"

    def test_health(self, api):
        response = api.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_initial_dashboard(self, api):
        body = api.get("/dashboard").json()

        assert body["records"] == []
        assert body["loading"] is False
        assert body["error"] is None
        assert body["date_range"] == {"start_date": "2024-04-30", "end_date": "2024-05-03"}

    def test_search(self, api, fake_client):
        response = api.post("/dashboard/search", json={"start_date": "2024-05-01", "end_date": "2024-05-03"})

        assert response.status_code == 200
        body = response.json()
        assert body["statistics"] == {"total": 2, "urgent": 1, "closing_today": 1}
        assert [row["key"] for row in body["records"]] == ["A-0", "B-1"]
        assert body["records"][0]["record"]["title"] == "[긴급] 공사 발주"
        assert "detail_url" in body["records"][0]["record"]

        _, window = fake_client.calls[0]
        assert window.begin_timestamp == "202405010000"
        assert window.end_timestamp == "202405032359"

    def test_search_without_body_keeps_range(self, api, fake_client):
        response = api.post("/dashboard/search")

        assert response.status_code == 200
        _, window = fake_client.calls[0]
        assert window.begin_timestamp == "202404300000"

    def test_search_domain_error(self, api, fake_client):
        fake_client.outcome = DomainError(message="Invalid Key", result_code="99")

        body = api.post("/dashboard/search").json()

        assert body["records"] == []
        assert body["error"] == "Invalid Key"
        assert body["error_kind"] == "domain"

    def test_search_rejects_malformed_date(self, api):
        response = api.post("/dashboard/search", json={"start_date": "20240501"})

        assert response.status_code == 422


class TestCredentialApi:
    """인증키 API"""

    def test_get_masked(self, api):
        body = api.get("/credential").json()

        assert body == {"configured": True, "masked": "abcd...5678"}

    def test_put_credential(self, api):
        response = api.put("/credential", json={"api_key": "zzzz0000yyyy1111"})

        assert response.status_code == 200
        assert response.json()["masked"] == "zzzz...1111"
        assert app.state.controller.credential == "zzzz0000yyyy1111"
