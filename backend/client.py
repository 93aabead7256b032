# backend/client.py
import os

import requests

API = os.environ.get("TASKBOARD_API", "http://localhost:8080/v1")


def _show(label, r):
    print(f"{label}:", r.status_code, r.json())
    return r


def check_health(http=requests):
    return _show("Health", http.get(API.rsplit("/v1", 1)[0] + "/healthz", timeout=10))


def check_tasks(http=requests):
    r = _show("Create task", http.post(f"{API}/tasks", json={"title": "Buy milk", "status": False}, timeout=10))
    task_id = r.json()["data"]["id"]
    _show("List tasks", http.get(f"{API}/tasks", params={"page": 1, "limit": 10}, timeout=10))
    _show("Get task", http.get(f"{API}/tasks/{task_id}", timeout=10))
    _show("Update task", http.put(f"{API}/tasks/{task_id}", json={"title": "Buy oat milk", "status": True}, timeout=10))
    return _show("Delete task", http.delete(f"{API}/tasks/{task_id}", timeout=10))


def check_events(http=requests):
    payload = {
        "title": "Standup",
        "location": "Room 4",
        "startTime": "2024-01-01T10:00:00Z",
        "endTime": "2024-01-01T10:15:00Z",
    }
    r = _show("Create event", http.post(f"{API}/events", json=payload, timeout=10))
    event_id = r.json()["data"]["id"]
    _show("List events", http.get(f"{API}/events", timeout=10))
    payload["complete"] = True
    _show("Update event", http.put(f"{API}/events/{event_id}", json=payload, timeout=10))
    bad = dict(payload, endTime=payload["startTime"])
    _show("Reject event", http.post(f"{API}/events", json=bad, timeout=10))
    return _show("Delete event", http.delete(f"{API}/events/{event_id}", timeout=10))


if __name__ == "__main__":
    print("--- Testing Taskboard backend ---")
    check_health()
    check_tasks()
    check_events()
