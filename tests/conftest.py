from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    from app.main import app

    return TestClient(app)


@pytest.fixture()
def record():
    return {
        "name": "Asha Rao",
        "gender": {"value": "female", "label": "Female"},
        "email": "asha@example.com",
        "countryCode": {"value": "+91", "label": "IN"},
        "phone": "+919876543210 (IN)",
        "address": "12 MG Road, Bengaluru",
        "pincode": "560001",
        "date": "2024-05-01",
        "time": "10:30",
        "reason": "Site visit",
    }


@pytest.fixture()
def form_fields():
    return {
        "name": "Asha Rao",
        "gender": "female",
        "email": "asha@example.com",
        "country_code": "+91",
        "phone": "9876543210",
        "address": "12 MG Road, Bengaluru",
        "pincode": "560001",
        "date": "2024-05-01",
        "time": "10:30",
        "reason": "Site visit",
    }
