import concurrent.futures
import uuid
from fastapi.testclient import TestClient


class TestE2E:
    def test_complete_user_journey(self, client: TestClient):
        email = f"user_{uuid.uuid4().hex[:8]}@example.com"

        # 1. Sign in, twice
        r = client.post("/user", json={"email": email})
        assert r.status_code == 200
        first = r.json()
        r = client.post("/user", json={"email": email})
        assert r.status_code == 200
        second = r.json()
        assert second["id"] == first["id"]
        assert second["token"] != first["token"]
        headers = {"Authorization": f"Bearer {second['token']}"}

        # 2. Add a task without a token
        r = client.post(f"/tasks?email={email}", json={"title": "t"})
        assert r.status_code == 401

        # 3. Add a task with the session's token
        r = client.post(f"/tasks?email={email}", json={"title": "t", "user_email": email}, headers=headers)
        assert r.status_code == 200
        task_id = r.json()["inserted_id"]

        r = client.get(f"/tasks?email={email}", headers=headers)
        assert r.status_code == 200
        tasks = r.json()
        assert len(tasks) == 1
        assert tasks[0]["title"] == "t"
        assert tasks[0]["id"] == task_id

        # 4. The older token still works; tokens are not revoked on re-issue
        old_headers = {"Authorization": f"Bearer {first['token']}"}
        assert client.get(f"/tasks?email={email}", headers=old_headers).status_code == 200

        # 5. Another user cannot touch the task
        other = f"other_{uuid.uuid4().hex[:8]}@example.com"
        other_token = client.post("/user", json={"email": other}).json()["token"]
        other_headers = {"Authorization": f"Bearer {other_token}"}
        r = client.get(f"/tasks?email={other}", headers=other_headers)
        assert r.json() == []
        r = client.delete(f"/tasks/{task_id}?email={other}", headers=other_headers)
        assert r.status_code == 403

        # 6. Update, then delete
        r = client.put(f"/tasks/{task_id}?email={email}", json={"status": "done"}, headers=headers)
        assert r.json()["modified_count"] == 1
        r = client.delete(f"/tasks/{task_id}?email={email}", headers=headers)
        assert r.json()["deleted_count"] == 1
        r = client.get(f"/tasks?email={email}", headers=headers)
        assert r.json() == []

    def test_concurrent_operations(self, client: TestClient):
        email = f"test_{uuid.uuid4().hex[:8]}@example.com"
        token = client.post("/user", json={"email": email}).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        def create_task(i):
            return client.post(f"/tasks?email={email}", json={"title": f"Concurrent Task {i}"}, headers=headers)

        with concurrent.futures.ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(create_task, i) for i in range(5)]
            responses = [f.result() for f in futures]

        assert all(r.status_code == 200 for r in responses)
        assert len({r.json()["inserted_id"] for r in responses}) == 5

        r = client.get(f"/tasks?email={email}", headers=headers)
        tasks = r.json()
        assert len(tasks) == 5
        assert {t["title"] for t in tasks} == {f"Concurrent Task {i}" for i in range(5)}
        assert all(t["user_email"] == email for t in tasks)
