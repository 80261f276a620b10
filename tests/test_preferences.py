from todoapp.core.config import settings
from tests.conftest import API


async def test_defaults_are_created_lazily(client, auth_headers):
    response = await client.get(f"{API}/preferences/", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["preferred_categories"] == []
    assert data["working_hours"] == {"start": 9, "end": 17}
    assert data["ml_models"] == {"priority_model": None, "category_model": None, "duration_model": None}
    assert data["productivity"]["average_tasks_per_day"] == 0


async def test_update_requires_something(client, auth_headers):
    response = await client.patch(f"{API}/preferences/", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "No valid updates provided"


async def test_update_working_hours(client, auth_headers):
    response = await client.patch(
        f"{API}/preferences/", json={"working_hours": {"start": 7, "end": 15}}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["working_hours"] == {"start": 7, "end": 15}

    response = await client.patch(
        f"{API}/preferences/", json={"working_hours": {"start": 24, "end": 15}}, headers=auth_headers
    )
    assert response.status_code == 422


async def test_category_list_is_clipped(client, auth_headers):
    categories = [f"cat{i}" for i in range(12)]
    response = await client.patch(
        f"{API}/preferences/", json={"preferred_categories": categories}, headers=auth_headers
    )
    assert response.json()["preferred_categories"] == categories[-10:]


async def test_oldest_category_is_evicted(client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "PREFERRED_CATEGORIES_LIMIT", 2)
    for category in ("work", "health", "finance"):
        await client.post(f"{API}/tasks/", json={"title": "t", "category": category}, headers=auth_headers)

    response = await client.get(f"{API}/preferences/", headers=auth_headers)
    assert response.json()["preferred_categories"] == ["health", "finance"]


async def test_productivity_without_tasks(client, auth_headers):
    response = await client.post(f"{API}/preferences/productivity", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "No tasks found to calculate metrics"}


async def test_productivity_metrics(client, auth_headers):
    high = (await client.post(f"{API}/tasks/", json={"title": "a", "priority": "high"}, headers=auth_headers)).json()
    await client.post(f"{API}/tasks/", json={"title": "b", "priority": "high"}, headers=auth_headers)
    await client.post(f"{API}/tasks/", json={"title": "c", "priority": "low"}, headers=auth_headers)
    await client.patch(f"{API}/tasks/{high['id']}", json={"completed": True}, headers=auth_headers)

    response = await client.post(f"{API}/preferences/productivity", headers=auth_headers)
    assert response.status_code == 200
    productivity = response.json()["productivity"]
    assert productivity["average_tasks_per_day"] == 1.0
    assert productivity["high_priority_completion_rate"] == 0.5
    assert 0 <= productivity["average_completion_time"] < 1
    assert productivity["last_calculated"] is not None


async def test_ml_models(client, auth_headers):
    response = await client.post(f"{API}/preferences/ml-models", json={}, headers=auth_headers)
    assert response.status_code == 400

    response = await client.post(
        f"{API}/preferences/ml-models", json={"priority_model": "{\"weights\": [1, 2]}"}, headers=auth_headers
    )
    assert response.status_code == 200

    response = await client.get(f"{API}/preferences/ml-models", headers=auth_headers)
    assert response.json() == {
        "priority_model": "{\"weights\": [1, 2]}",
        "category_model": None,
        "duration_model": None,
    }
