from __future__ import annotations
import datetime as dt
from typing import Literal
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

GENDERS = [
    {"value": "male", "label": "Male"},
    {"value": "female", "label": "Female"},
    {"value": "other", "label": "Other"},
]

COUNTRY_CODES = [
    {"value": "+91", "label": "IN"},
    {"value": "+1", "label": "US"},
    {"value": "+44", "label": "UK"},
    {"value": "+61", "label": "AU"},
    {"value": "+65", "label": "SG"},
    {"value": "+971", "label": "AE"},
    {"value": "+49", "label": "DE"},
    {"value": "+33", "label": "FR"},
    {"value": "+81", "label": "JP"},
    {"value": "+977", "label": "NP"},
    {"value": "+880", "label": "BD"},
    {"value": "+94", "label": "LK"},
]

# Rendered as HTML constraint attributes; EntryForm below uses the same bounds.
FIELD_RULES = {
    "name":         {"required": True, "maxlength": 20, "message": "Name is required."},
    "gender":       {"required": True, "message": "Gender is required."},
    "email":        {"required": True, "message": "Email is required."},
    "country_code": {"required": True, "message": "Country code is required."},
    "phone":        {"required": True, "maxlength": 10, "message": "Phone is required and should be 10 digits."},
    "address":      {"required": True, "message": "Address is required."},
    "pincode":      {"required": True, "minlength": 6, "maxlength": 6, "pattern": "[0-9]{6}",
                     "message": "Pincode is required."},
    "date":         {"required": True, "message": "Date is required."},
    "time":         {"required": True, "message": "Time is required."},
    "reason":       {"required": True, "message": "Reason is required."},
}


def format_phone(code: dict, phone: str) -> str:
    return f"{code['value']}{phone} ({code['label']})"


def _option(options: list[dict], value: str) -> dict:
    for opt in options:
        if opt["value"] == value:
            return dict(opt)
    raise KeyError(value)


class EntryForm(BaseModel):
    """Form-encoded entry submitted without the browser script."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=FIELD_RULES["name"]["maxlength"])
    gender: Literal["male", "female", "other"]
    email: EmailStr
    country_code: str = Field(min_length=1)
    phone: str = Field(min_length=1, max_length=FIELD_RULES["phone"]["maxlength"])
    address: str = Field(min_length=1)
    pincode: str = Field(pattern=r"^[0-9]{6}$")
    date: dt.date
    time: dt.time
    reason: str = Field(min_length=1)

    @field_validator("country_code")
    @classmethod
    def known_country_code(cls, v: str) -> str:
        if v not in {c["value"] for c in COUNTRY_CODES}:
            raise ValueError("unknown country code")
        return v

    def to_record(self) -> dict:
        """Assemble the same JSON record the browser script posts."""
        code = _option(COUNTRY_CODES, self.country_code)
        return {
            "name": self.name,
            "gender": _option(GENDERS, self.gender),
            "email": str(self.email),
            "countryCode": code,
            "phone": format_phone(code, self.phone),
            "address": self.address,
            "pincode": self.pincode,
            "date": self.date.isoformat(),
            "time": self.time.strftime("%H:%M"),
            "reason": self.reason,
        }


def form_errors(exc: ValidationError) -> dict[str, str]:
    errors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else ""
        if field in FIELD_RULES:
            errors[field] = FIELD_RULES[field]["message"]
    return errors
