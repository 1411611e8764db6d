"""HTTP tests for the health check and the message dispatch endpoint."""

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from message_dispatcher.core.clock import get_clock
from message_dispatcher.core.settings import Settings, get_settings
from message_dispatcher.main import app
from message_dispatcher.services.dispatch_service import DispatchService


class ManualClock:
    """Clock test double: sleeping advances time instead of waiting."""

    def __init__(self) -> None:
        self.current = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current

    async def sleep(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class DispatchApiTestCase(unittest.TestCase):
    """Covers the success path and error mapping of /api/v1/messages/send."""

    def setUp(self) -> None:
        app.dependency_overrides[get_clock] = ManualClock
        app.dependency_overrides[get_settings] = lambda: Settings(send_delay_seconds=1)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_health_check(self) -> None:
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_send_returns_emitted_lines_in_order(self) -> None:
        response = self.client.post(
            "/api/v1/messages/send",
            json={
                "channel": "whatsapp",
                "recipient": "+5511999999999",
                "messages": [
                    {"type": "text", "content": "Hello"},
                    {
                        "type": "video",
                        "content": "Tour",
                        "file_name": "tour",
                        "file_format": "mp4",
                        "duration_seconds": 12.5,
                    },
                ],
            },
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["sent"], 2)
        self.assertEqual(
            body["lines"],
            [
                "2024-01-01 09:30:01 UTC | To: +5511999999999 | [TEXTO] Hello",
                "2024-01-01 09:30:02 UTC | To: +5511999999999 | [VIDEO] Tour | File: tour.mp4 | Duration: 12.5s",
            ],
        )

    def test_unimplemented_channel_returns_501(self) -> None:
        response = self.client.post(
            "/api/v1/messages/send",
            json={"channel": "telegram", "recipient": "+123", "messages": [{"type": "text", "content": "Hi"}]},
        )

        self.assertEqual(response.status_code, 501)
        self.assertIn("not implemented", response.json()["detail"])

    def test_invalid_recipient_returns_400(self) -> None:
        response = self.client.post(
            "/api/v1/messages/send",
            json={"recipient": "5511999999999", "messages": [{"type": "text", "content": "Hi"}]},
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("must start with '+'", response.json()["detail"])

    def test_invalid_message_returns_400(self) -> None:
        response = self.client.post(
            "/api/v1/messages/send",
            json={
                "recipient": "+5511999999999",
                "messages": [
                    {
                        "type": "video",
                        "content": "Tour",
                        "file_name": "tour",
                        "file_format": "mp4",
                        "duration_seconds": 0,
                    }
                ],
            },
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("strictly positive", response.json()["detail"])

    def test_unrepresentable_durations_return_400(self) -> None:
        for seconds in (1e20, 1e-7):
            with self.subTest(seconds=seconds):
                response = self.client.post(
                    "/api/v1/messages/send",
                    json={
                        "recipient": "+5511999999999",
                        "messages": [
                            {
                                "type": "video",
                                "content": "Tour",
                                "file_name": "tour",
                                "file_format": "mp4",
                                "duration_seconds": seconds,
                            }
                        ],
                    },
                )

                self.assertEqual(response.status_code, 400)
                self.assertIn("Video duration", response.json()["detail"])

    def test_messages_are_stamped_with_the_injected_clock(self) -> None:
        with patch.object(DispatchService, "send_all", new=AsyncMock(return_value=2)) as send_all:
            response = self.client.post(
                "/api/v1/messages/send",
                json={
                    "recipient": "+5511999999999",
                    "messages": [
                        {"type": "text", "content": "Hello"},
                        {
                            "type": "video",
                            "content": "Tour",
                            "file_name": "tour",
                            "file_format": "mp4",
                            "duration_seconds": 3,
                        },
                    ],
                },
            )

        self.assertEqual(response.status_code, 200)
        messages = send_all.await_args.args[2]
        self.assertEqual(
            [message.created_at for message in messages],
            [datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)] * 2,
        )

    def test_unknown_channel_value_is_rejected_by_schema(self) -> None:
        response = self.client.post(
            "/api/v1/messages/send",
            json={"channel": "sms", "recipient": "+1", "messages": [{"type": "text", "content": "Hi"}]},
        )

        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
