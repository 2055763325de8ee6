from __future__ import annotations

import os
from datetime import datetime

from locust import HttpUser, between, task

HEALTH_PATH = os.getenv("HEALTH_PATH", "/api/health")
EXPECTED_KEYS = {"ok", "status", "storage", "now"}


class HealthProbeUser(HttpUser):
    wait_time = between(0.01, 0.10)

    @task
    def health(self) -> None:
        with self.client.get(
            HEALTH_PATH,
            catch_response=True,
            name=f"GET {HEALTH_PATH}",
        ) as response:
            if response.status_code != 200:
                response.failure(
                    f"Unexpected status={response.status_code} body={response.text[:180]}"
                )
                return
            body = response.json()
            if set(body) != EXPECTED_KEYS or body["status"] != "ok":
                response.failure(f"Unexpected body={response.text[:180]}")
                return
            try:
                datetime.fromisoformat(body["now"].replace("Z", "+00:00"))
            except ValueError:
                response.failure(f"Invalid timestamp now={body['now']}")
                return
            if response.headers.get("cache-control", "").split(",")[0] != "no-store":
                response.failure("Missing no-store cache header")
                return
            response.success()
