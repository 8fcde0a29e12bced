"""Pytest fixtures for testing"""

from typing import Any, Callable, List

import httpx
import pytest

from ohmyfin import Ohmyfin

TEST_API_KEY = "test-key"


@pytest.fixture
def uetr() -> str:
    return "97ed4827-7b6f-4491-a06f-b548d5a7512d"


@pytest.fixture
def sample_track_result() -> dict:
    """Track payload for a settled transfer"""
    return {
        "status": "success",
        "lastupdate": "2024-01-15",
        "details": [],
        "limits": {"daily": 100, "monthly": 1000, "annual": 10000},
    }


@pytest.fixture
def sample_validate_result() -> dict:
    return {
        "beneficiary_bic": {"status": "ok"},
        "beneficiary_iban": {
            "status": "warning",
            "recommendation": "Confirm the account owner",
            "options": ["DE89370400440532013000"],
        },
        "avg_business_days": 2,
        "available_correspondents": [{"corresBIC": "CHASUS33", "is_preferred": True}],
    }


@pytest.fixture
def sample_ssi_result() -> dict:
    return {
        "correspondents": [
            {
                "id": 7,
                "bank": "JPMorgan Chase Bank",
                "swift": "CHASUS33",
                "currency": "USD",
                "account": "001-1-234567",
                "is_preferred": True,
            }
        ],
        "currencies": ["USD", "EUR"],
        "limits": {"daily": 100, "monthly": 1000, "annual": 10000},
    }


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the stub transport"""
    return []


@pytest.fixture
def make_client(sent_requests: List[httpx.Request]) -> Callable[..., Ohmyfin]:
    """
    Build a client whose transport answers every request with a canned response.

    Pass json_body for a JSON reply or content for a raw body.
    """

    def factory(status_code: int = 200, json_body: Any = None, content: bytes | None = None, **kwargs) -> Ohmyfin:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        return Ohmyfin(api_key=TEST_API_KEY, transport=httpx.MockTransport(handler), **kwargs)

    return factory
