"""
Unitip Backend — Job Application Schemas
==========================================

What:  POST /api/v1/jobs/{job_id}/apply request and response bodies.
"""

from typing import ClassVar, Dict

from pydantic import BaseModel, ConfigDict, Field


class JobApplyRequest(BaseModel):
    """The freelancer's asking price for the job."""
    model_config = ConfigDict(strict=True)

    price: float = Field(ge=0, allow_inf_nan=False, description="Asking price")

    error_messages: ClassVar[Dict[str, str]] = {
        "price.missing": "Biaya tidak boleh kosong!",
        "price.greater_than_equal": "Biaya tidak boleh negatif!",
    }


class JobApplyResponse(BaseModel):
    success: bool
    id: str
