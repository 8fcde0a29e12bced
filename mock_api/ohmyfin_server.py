"""Mock Ohmyfin API server for local development and integration tests

Run with: uvicorn mock_api.ohmyfin_server:app --port 8001
"""

import os
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

API_KEY = os.getenv("MOCK_OHMYFIN_API_KEY", "test-key")
KNOWN_UETR = "97ed4827-7b6f-4491-a06f-b548d5a7512d"
LIMITS = {"daily": 100, "monthly": 1000, "annual": 10000}

app = FastAPI(title="Mock Ohmyfin Server", version="1.0.0")


def _error(status_code: int, message: str, errors: Dict[str, List[str]] | None = None) -> JSONResponse:
    content: Dict[str, Any] = {"message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def _authorized_body(request: Request, required: List[str]) -> Dict[str, Any] | JSONResponse:
    if request.headers.get("KEY") != API_KEY:
        return _error(401, "Invalid API key")
    body = await request.json()
    missing = {field: [f"The {field} field is required."] for field in required if not body.get(field)}
    if missing:
        return _error(422, "The given data was invalid.", missing)
    return body


@app.post("/api/track")
async def track(request: Request):
    body = await _authorized_body(request, ["amount", "date", "currency"])
    if isinstance(body, JSONResponse):
        return body
    if body.get("uetr") != KNOWN_UETR and not body.get("ref"):
        return {"status": "unknown", "lastupdate": body["date"], "details": [], "limits": LIMITS}
    return {
        "status": "success",
        "lastupdate": body["date"],
        "details": [
            {
                "id": 1,
                "bank": "Deutsche Bank AG",
                "swift": "DEUTDEFF",
                "status": "success",
                "reason": "",
                "route": "DEUTDEFF -> CHASUS33",
            }
        ],
        "limits": LIMITS,
    }


@app.post("/api/change")
async def change(request: Request):
    body = await _authorized_body(request, ["status", "role"])
    if isinstance(body, JSONResponse):
        return body
    return {"message": "Transaction status updated"}


@app.post("/api/validate")
async def validate(request: Request):
    body = await _authorized_body(request, ["beneficiary_bic", "currency"])
    if isinstance(body, JSONResponse):
        return body
    result: Dict[str, Any] = {
        "beneficiary_bic": {"status": "ok"},
        "avg_business_days": 2,
        "available_correspondents": [{"corresBIC": "CHASUS33", "is_preferred": True}],
    }
    iban = body.get("beneficiary_iban")
    if iban:
        result["beneficiary_iban"] = (
            {"status": "ok"}
            if iban.startswith("DE")
            else {"status": "invalid", "recommendation": "Check the IBAN country code", "options": []}
        )
    return result


@app.post("/api/getssi")
async def getssi(request: Request):
    body = await _authorized_body(request, ["swift", "currency"])
    if isinstance(body, JSONResponse):
        return body
    return {
        "correspondents": [
            {
                "id": 1,
                "bank": "JPMorgan Chase Bank",
                "swift": "CHASUS33",
                "currency": body["currency"],
                "account": "001-1-234567",
                "is_preferred": True,
            }
        ],
        "currencies": [body["currency"]],
        "limits": LIMITS,
    }
