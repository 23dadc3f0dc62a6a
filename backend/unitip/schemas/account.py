"""
Unitip Backend — Account Schemas
==================================

What:  GET/PATCH /api/v1/accounts/profile request and response bodies.
"""

from typing import ClassVar, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


class ProfileResponse(BaseModel):
    """The current session's user, with the session token and role."""
    id: str
    name: str
    email: str
    token: str
    role: str
    gender: str


class ProfileUpdateRequest(BaseModel):
    """
    PATCH body. `gender` may be an empty string (not specified) but must be
    present.
    """
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1, description="Display name")
    gender: Literal["male", "female", ""] = Field(description="male, female or empty")

    error_messages: ClassVar[Dict[str, str]] = {
        "name.missing": "Nama pengguna tidak boleh kosong!",
        "name.string_too_short": "Nama pengguna tidak boleh kosong!",
        "gender.missing": "Jenis kelamin tidak boleh kosong!",
    }


class ProfileUpdateResponse(BaseModel):
    id: str
    name: str
    gender: str
