"""Pydantic models for Ohmyfin request and response payloads

Request models carry presence-optional fields: required-field checks belong to
the client and raise ohmyfin.ValidationError rather than pydantic errors.
Response models allow unknown fields and tolerate missing ones so that a newer
API payload never breaks typed access.
"""

from datetime import date as Date
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

ChangeStatus = Literal["in process", "success", "rejected", "on hold"]
Role = Literal["originator", "beneficiary", "intermediary", "correspondent", "other"]

Amount = Union[int, float]


class RequestModel(BaseModel):
    """Base for request bodies; extra keys pass through to the wire"""

    model_config = ConfigDict(extra="allow")


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


# Requests


class TrackRequest(RequestModel):
    """Body for POST /api/track"""

    uetr: Optional[str] = None
    ref: Optional[str] = None
    amount: Optional[Amount] = None
    date: Optional[Union[Date, str]] = None
    currency: Optional[str] = None


class ChangeRequest(RequestModel):
    """Body for POST /api/change (status reports from financial institutions)"""

    uetr: Optional[str] = None
    ref: Optional[str] = None
    amount: Optional[Amount] = None
    date: Optional[Union[Date, str]] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    role: Optional[str] = None
    swift: Optional[str] = None
    nextName: Optional[str] = None
    nextSwift: Optional[str] = None
    message: Optional[str] = None
    details: Optional[str] = None


class ValidateRequest(RequestModel):
    """Body for POST /api/validate"""

    beneficiary_bic: Optional[str] = None
    currency: Optional[str] = None
    correspondent_bic: Optional[str] = None
    correspondent_account: Optional[str] = None
    beneficiary_iban: Optional[str] = None
    beneficiary_owner: Optional[str] = None
    beneficiary_country: Optional[str] = None
    beneficiary_region: Optional[str] = None
    sender_bic: Optional[str] = None
    sender_correspondent_bic: Optional[str] = None


class SSIRequest(RequestModel):
    """Body for POST /api/getssi"""

    swift: Optional[str] = None
    currency: Optional[str] = None


# Responses


class Limits(ResponseModel):
    daily: Optional[float] = None
    monthly: Optional[float] = None
    annual: Optional[float] = None


class HopDetail(ResponseModel):
    """One bank hop in a tracked payment's route"""

    id: Optional[int] = None
    bank: Optional[str] = None
    swift: Optional[str] = None
    status: Optional[str] = None
    reason: Optional[str] = None
    route: Optional[str] = None


class TrackResult(ResponseModel):
    status: Optional[str] = None  # in progress | success | rejected | on hold | unknown | future
    lastupdate: Optional[str] = None
    details: List[HopDetail] = []
    limits: Optional[Limits] = None


class ChangeResult(ResponseModel):
    message: Optional[str] = None


class ValidationStatus(ResponseModel):
    status: Optional[str] = None  # ok | invalid | warning
    recommendation: Optional[str] = None
    details: Optional[str] = None
    options: Optional[List[str]] = None


class AvailableCorrespondent(ResponseModel):
    corresBIC: Optional[str] = None
    is_preferred: Optional[bool] = None


class ValidateResult(ResponseModel):
    beneficiary_bic: Optional[ValidationStatus] = None
    correspondent_bic: Optional[ValidationStatus] = None
    sender_bic: Optional[ValidationStatus] = None
    sender_correspondent_bic: Optional[ValidationStatus] = None
    beneficiary_iban: Optional[ValidationStatus] = None
    beneficiary_address: Optional[ValidationStatus] = None
    avg_business_days: Optional[int] = None
    available_correspondents: Optional[List[AvailableCorrespondent]] = None


class Correspondent(ResponseModel):
    """Correspondent bank entry from standard settlement instructions"""

    id: Optional[int] = None
    bank: Optional[str] = None
    swift: Optional[str] = None
    currency: Optional[str] = None
    account: Optional[str] = None
    is_preferred: Optional[bool] = None


class SSIResult(ResponseModel):
    correspondents: List[Correspondent] = []
    currencies: List[str] = []
    limits: Optional[Limits] = None
