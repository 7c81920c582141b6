"""Integration tests for notification listing, read-state and websocket."""

from __future__ import annotations

from fastapi.testclient import TestClient

ALICE = {"X-User-Id": "alice", "X-User-Name": "Alice", "X-User-Email": "alice@example.com"}
BOB = {"X-User-Id": "bob", "X-User-Name": "Bob", "X-User-Email": "bob@example.com"}


def _seed_notifications(client: TestClient, count: int = 3) -> str:
    post = client.post(
        "/posts/", json={"category": "tip", "content": "Hello"}, headers=ALICE
    ).json()
    for index in range(count):
        response = client.post(
            f"/posts/{post['id']}/replies", json={"content": f"Reply {index}"}, headers=BOB
        )
        assert response.status_code == 201
    return post["id"]


def _receive_until(websocket, predicate, limit: int = 50):
    for _ in range(limit):
        message = websocket.receive_json()
        if predicate(message):
            return message
    raise AssertionError("expected websocket message never arrived")


def test_mark_read_endpoint(client: TestClient) -> None:
    _seed_notifications(client, count=3)

    before = client.get("/notifications/", headers=ALICE).json()
    assert before["unread"] == 3
    assert before["badge"] == "3"
    assert "createdAt" in before["data"][0]

    marked = client.post("/notifications/read", headers=ALICE)
    assert marked.status_code == 200
    assert marked.json() == {"marked": 3}

    after = client.get("/notifications/", headers=ALICE).json()
    assert after["unread"] == 0
    assert after["badge"] is None
    assert client.get("/notifications/", headers=BOB).json()["data"] == []


def test_websocket_streams_snapshots_and_marks_read_on_open(client: TestClient) -> None:
    _seed_notifications(client, count=2)

    with client.websocket_connect("/notifications/ws?user_id=alice") as websocket:
        snapshot = _receive_until(
            websocket, lambda m: m.get("type") == "notifications" and m["unread"] == 2
        )
        assert snapshot["badge"] == "2"
        assert snapshot["stale"] is False
        assert client.app.state.notification_manager.connection_count("alice") == 1
        assert snapshot["data"][0]["message"] == "Bob replied to your post"

        websocket.send_json({"type": "ping"})
        _receive_until(websocket, lambda m: m.get("type") == "pong")

        websocket.send_json({"type": "open"})
        _receive_until(websocket, lambda m: m.get("type") == "panel" and m["open"] is True)
        _receive_until(websocket, lambda m: m.get("type") == "notifications" and m["unread"] == 0)

    assert client.get("/notifications/", headers=ALICE).json()["unread"] == 0


def test_websocket_requires_user_id(client: TestClient) -> None:
    from starlette.websockets import WebSocketDisconnect

    try:
        with client.websocket_connect("/notifications/ws") as websocket:
            websocket.receive_json()
    except WebSocketDisconnect as exc:
        assert exc.code == 1008
    else:
        raise AssertionError("connection without user_id must be refused")


def test_mark_read_reports_unavailable_when_view_never_loads(client: TestClient, monkeypatch) -> None:
    from jobhub.application.realtime import LiveView

    async def never_ready(self, timeout=None):
        raise TimeoutError

    monkeypatch.setattr(LiveView, "wait_ready", never_ready)

    response = client.post("/notifications/read", headers=ALICE)

    assert response.status_code == 503
