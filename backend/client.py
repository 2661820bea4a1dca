# backend/client.py
import os
import requests
from tasksync.core.config import settings
from tasksync.core.security import create_access_token

API = os.getenv("API_URL", "http://localhost:8000/api/v1")  # adjust if running on docker-compose
UID = os.getenv("CLIENT_UID", "demo-user")

HEADERS = {settings.AUTH_HEADER: create_access_token(UID, settings)}

def test_health():
    r = requests.get(f"{API}/health")
    print("Health:", r.status_code, r.json())

def test_create_task():
    payload = {
        "title": "Finish FastAPI client",
        "description": "Write a simple requests-based client script",
        "hexColor": "#4caf50",
        "dueAt": "2024-06-01",
    }
    r = requests.post(f"{API}/tasks/", json=payload, headers=HEADERS)
    print("Create task:", r.status_code, r.json())
    return r.json().get("id")

def test_list_tasks():
    r = requests.get(f"{API}/tasks/", headers=HEADERS)
    print("List tasks:", r.status_code, r.json())

def test_update_task(task_id):
    payload = {
        "title": "Finish FastAPI client",
        "description": "Done",
        "hexColor": "#2196f3",
        "dueAt": "2024-06-02T09:00:00Z",
    }
    r = requests.put(f"{API}/tasks/{task_id}", json=payload, headers=HEADERS)
    print("Update task:", r.status_code, r.json())

def test_sync():
    batch = [
        {
            "title": "Offline note",
            "dueAt": "2024-06-03",
            "createdAt": "2024-05-30T08:00:00Z",
            "updatedAt": "2024-05-31T08:00:00Z",
        },
    ]
    r = requests.post(f"{API}/tasks/sync", json=batch, headers=HEADERS)
    print("Sync:", r.status_code, r.json())

def test_delete_task(task_id):
    r = requests.delete(f"{API}/tasks/{task_id}", headers=HEADERS)
    print("Delete task:", r.status_code, r.json())

if __name__ == "__main__":
    print("--- Testing FastAPI backend ---")
    test_health()
    task_id = test_create_task()
    test_list_tasks()
    test_update_task(task_id)
    test_sync()
    test_delete_task(task_id)
