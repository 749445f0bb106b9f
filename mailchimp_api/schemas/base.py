"""Pydantic base schema for request models.

Provides a common `BaseSchema` that enforces the extra-field policy for the
models that describe outgoing API parameters. MailChimp's v1.3 wire format is
snake_case, so no alias generator is configured.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for all Pydantic models in mailchimp_api.

    - Rejects unknown fields
    - Re-validates on attribute assignment
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )
