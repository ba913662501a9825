# backend/tests/test_health.py

from unittest import mock

from django.db.utils import OperationalError
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient


class HealthCheckTests(TestCase):
    """Public health probe under /api/v1/health/."""

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("health-check")

    def test_reports_ok_without_token(self):
        res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json(), {"status": "ok", "db": "ok"})

    def test_reports_degraded_when_db_is_down(self):
        with mock.patch("backend.urls.connections") as conns:
            conns.__getitem__.return_value.cursor.side_effect = OperationalError("gone")
            res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(res.json(), {"status": "degraded", "db": "down"})
