"""
HTTP API tests through FastAPI's TestClient

The application lifespan runs against the per-test database, so the shared
activity types are seeded before every test.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from mindtrack.server.exceptions import RecordRetrievalError
from mindtrack.server.main import app
from mindtrack.server.services import analytics_service

USER = {"X-User-Id": "u1"}
OTHER_USER = {"X-User-Id": "u2"}

SELF_TEST_BODY = {
    "answers": {
        "socialMediaUsage": 2,
        "procrastination": 3,
        "focusTime": 60,
        "distractions": ["스마트폰"],
        "productiveHours": 4,
        "sleepSchedule": {"bedtime": "23:30", "wakeupTime": "07:00"},
    }
}


@pytest.fixture
def client(db_manager):
    with TestClient(app) as test_client:
        yield test_client


def _type_id(client, name, headers=USER):
    types = client.get("/api/mindset/activity/types", headers=headers).json()
    return next(t["id"] for t in types if t["name"] == name)


def _create_record(client, type_id, start, end, headers=USER):
    return client.post(
        "/api/mindset/activity/records",
        json={"activityTypeId": type_id, "startTime": start, "endTime": end},
        headers=headers,
    )


class TestService:
    def test_root_and_health(self, client):
        assert client.get("/").json()["service"] == "MindTrack API"
        assert client.get("/health").json()["status"] == "healthy"

    def test_missing_user_header(self, client):
        response = client.get("/api/mindset/activity/types")
        assert response.status_code == 401

        response = client.get("/api/mindset/self-test/can-take", headers={"X-User-Id": "  "})
        assert response.status_code == 401


class TestActivityTypeApi:
    def test_list_shared_types(self, client):
        response = client.get("/api/mindset/activity/types", headers=USER)

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 10
        assert set(body[0]) == {"id", "name", "icon", "color", "isDefault", "userId", "ownership"}
        assert body[0]["ownership"] == "shared"

    def test_create_update_delete(self, client):
        created = client.post(
            "/api/mindset/activity/types", json={"name": "독서", "color": "#000000"}, headers=USER
        ).json()
        assert created["ownership"] == "owned"
        assert created["userId"] == "u1"

        response = client.put(
            f"/api/mindset/activity/types/{created['id']}", json={"icon": "book"}, headers=USER
        )
        assert response.status_code == 200
        assert response.json()["icon"] == "book"
        assert response.json()["color"] == "#000000"

        response = client.delete(f"/api/mindset/activity/types/{created['id']}", headers=USER)
        assert response.json() == {"success": True}

    def test_shared_type_is_read_only(self, client):
        shared_id = _type_id(client, "업무")

        assert client.put(
            f"/api/mindset/activity/types/{shared_id}", json={"name": "x"}, headers=USER
        ).status_code == 403
        assert client.delete(f"/api/mindset/activity/types/{shared_id}", headers=USER).status_code == 403

    def test_other_users_type(self, client):
        created = client.post("/api/mindset/activity/types", json={"name": "독서"}, headers=USER).json()

        response = client.delete(f"/api/mindset/activity/types/{created['id']}", headers=OTHER_USER)
        assert response.status_code == 404

    def test_type_in_use(self, client):
        created = client.post("/api/mindset/activity/types", json={"name": "독서"}, headers=USER).json()
        _create_record(client, created["id"], "2025-03-10T09:00:00", "2025-03-10T10:00:00")

        response = client.delete(f"/api/mindset/activity/types/{created['id']}", headers=USER)
        assert response.status_code == 409

    def test_empty_name_rejected(self, client):
        response = client.post("/api/mindset/activity/types", json={"name": ""}, headers=USER)
        assert response.status_code == 422

    def test_null_name_update_rejected(self, client):
        created = client.post("/api/mindset/activity/types", json={"name": "독서"}, headers=USER).json()

        response = client.put(
            f"/api/mindset/activity/types/{created['id']}", json={"name": None}, headers=USER
        )

        assert response.status_code == 422
        names = [t["name"] for t in client.get("/api/mindset/activity/types", headers=USER).json()]
        assert "독서" in names


class TestActivityRecordApi:
    def test_create_list_delete(self, client):
        work_id = _type_id(client, "업무")

        response = _create_record(client, work_id, "2025-03-10T09:00:00", "2025-03-10T11:00:00")
        assert response.status_code == 200
        record = response.json()
        assert record["activityType"]["name"] == "업무"
        assert record["startTime"] == "2025-03-10T09:00:00"

        listed = client.get(
            "/api/mindset/activity/records",
            params={"startDate": "2025-03-10T00:00:00", "endDate": "2025-03-11T00:00:00"},
            headers=USER,
        ).json()
        assert [r["id"] for r in listed] == [record["id"]]
        assert client.get("/api/mindset/activity/records", headers=OTHER_USER).json() == []

        assert client.delete(f"/api/mindset/activity/records/{record['id']}", headers=USER).json() == {"success": True}
        assert client.delete(f"/api/mindset/activity/records/{record['id']}", headers=USER).status_code == 404

    def test_invalid_time_range(self, client):
        work_id = _type_id(client, "업무")

        response = _create_record(client, work_id, "2025-03-10T11:00:00", "2025-03-10T09:00:00")
        assert response.status_code == 400

    def test_unknown_type(self, client):
        response = _create_record(client, "missing", "2025-03-10T09:00:00", "2025-03-10T10:00:00")
        assert response.status_code == 404


class TestAnalyzeApi:
    def test_analysis_of_range(self, client):
        _create_record(client, _type_id(client, "업무"), "2025-03-10T09:00:00", "2025-03-10T11:00:00")
        _create_record(client, _type_id(client, "SNS"), "2025-03-10T12:00:00", "2025-03-10T13:20:00")

        response = client.get(
            "/api/mindset/activity/analyze",
            params={"startDate": "2025-03-10T00:00:00", "endDate": "2025-03-11T00:00:00"},
            headers=USER,
        )

        assert response.status_code == 200
        body = response.json()
        assert [a["name"] for a in body["timeByActivity"]] == ["업무", "SNS"]
        assert body["summary"] == {
            "totalRecordedMinutes": 200,
            "totalRecordedHours": 3.3,
            "leisureMinutes": 80,
            "leisurePercentage": 40,
            "daysInRange": 1,
        }
        assert len(body["suggestions"]) == 3

    def test_default_window(self, client):
        response = client.get("/api/mindset/activity/analyze", headers=USER)

        assert response.status_code == 200
        assert response.json()["summary"]["daysInRange"] == 7

    def test_inverted_range(self, client):
        response = client.get(
            "/api/mindset/activity/analyze",
            params={"startDate": "2025-03-11T00:00:00", "endDate": "2025-03-10T00:00:00"},
            headers=USER,
        )

        assert response.status_code == 200
        assert response.json()["timeByActivity"] == []

    def test_retrieval_failure(self, client):
        store = MagicMock()
        store.find_records.side_effect = RecordRetrievalError("활동 기록을 불러오지 못했습니다.")

        with patch.object(analytics_service, "record_store", store):
            response = client.get("/api/mindset/activity/analyze", headers=USER)

        assert response.status_code == 503
        assert response.json()["detail"] == "활동 기록을 불러오지 못했습니다."


class TestSelfTestApi:
    def test_take_then_blocked(self, client):
        response = client.post("/api/mindset/self-test", json=SELF_TEST_BODY, headers=USER)
        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 92
        assert body["isCompleted"] is True
        assert body["answers"]["sleepSchedule"]["wakeupTime"] == "07:00"

        second = client.post("/api/mindset/self-test", json=SELF_TEST_BODY, headers=USER)
        assert second.status_code == 400
        assert "하루에 한 번만" in second.json()["detail"]

        eligibility = client.get("/api/mindset/self-test/can-take", headers=USER).json()
        assert eligibility["canTake"] is False
        assert eligibility["nextAvailableAt"] is not None

        history = client.get("/api/mindset/self-test/history", headers=USER).json()
        assert [t["id"] for t in history] == [body["id"]]

    def test_fresh_user_can_take(self, client):
        response = client.get("/api/mindset/self-test/can-take", headers=USER)
        assert response.json() == {"canTake": True, "nextAvailableAt": None}

    def test_invalid_answers(self, client):
        body = {"answers": dict(SELF_TEST_BODY["answers"], procrastination=9)}

        response = client.post("/api/mindset/self-test", json=body, headers=USER)
        assert response.status_code == 422
