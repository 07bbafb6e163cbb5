"""
Tests for the toast queue and notification routes
"""
import asyncio

import pytest

from app.services.notifications import ToastQueue


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestToastQueue:

    def test_add_defaults_to_info(self):
        queue = ToastQueue(clock=FakeClock())
        toast = queue.add("Hello")
        assert toast.type == "info"
        assert queue.active() == [toast]

    def test_ids_unique_within_same_instant(self):
        queue = ToastQueue(clock=FakeClock())
        first = queue.add("one")
        second = queue.add("two")
        assert first.id != second.id
        assert len(queue) == 2

    def test_remove(self):
        queue = ToastQueue(clock=FakeClock())
        toast = queue.add("bye", "error")
        assert queue.remove(toast.id) is True
        assert queue.remove(toast.id) is False
        assert len(queue) == 0

    def test_expire_drops_old_entries(self):
        clock = FakeClock()
        queue = ToastQueue(duration=5.0, clock=clock)
        old = queue.add("old")
        clock.now += 3
        fresh = queue.add("fresh")
        clock.now += 2
        assert queue.expire() == [old.id]
        assert queue.active() == [fresh]

    def test_clear(self):
        queue = ToastQueue(clock=FakeClock())
        queue.add("a")
        queue.add("b")
        queue.clear()
        assert queue.active() == []

    @pytest.mark.asyncio
    async def test_timer_removes_toast(self):
        queue = ToastQueue(duration=0.01)
        queue.add("short lived", "success")
        await asyncio.sleep(0.05)
        assert len(queue) == 0

    @pytest.mark.asyncio
    async def test_remove_cancels_timer(self):
        queue = ToastQueue(duration=10)
        toast = queue.add("dismissed")
        assert toast.id in queue._timers
        queue.remove(toast.id)
        assert queue._timers == {}


class TestNotificationRoutes:

    def test_empty(self, client):
        response = client.get("/api/notifications")
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_dismiss(self, client):
        client.post("/api/teacher/students/s2/message", json={"message": "Well done"})
        toasts = client.get("/api/notifications").json()["data"]
        assert toasts[0]["message"] == "Message sent to Priya Patel"

        response = client.delete(f"/api/notifications/{toasts[0]['id']}")
        assert response.status_code == 200
        assert client.get("/api/notifications").json()["data"] == []

    def test_dismiss_unknown(self, client):
        response = client.delete("/api/notifications/nope")
        assert response.status_code == 404
