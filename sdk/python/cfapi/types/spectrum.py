"""Spectrum application types."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import AwareDatetime, BaseModel, Field, field_validator, model_validator


class SpectrumTLS(str, Enum):
    OFF = "off"
    FLEXIBLE = "flexible"
    FULL = "full"
    STRICT = "strict"


class SpectrumAppDNS(BaseModel):
    """Origin DNS record for a Spectrum application."""

    type: str = ""
    name: str = ""


class SpectrumApp(BaseModel):
    id: str = ""
    protocol: str = ""
    ipv4: bool = False
    dns: SpectrumAppDNS = Field(default_factory=SpectrumAppDNS)
    origin_direct: list[str] = []
    ip_firewall: bool = False
    proxy_protocol: bool = False
    # Unrecognised modes are kept as plain strings.
    tls: Optional[Union[SpectrumTLS, str]] = Field(default=None, union_mode="left_to_right")
    created_on: Optional[AwareDatetime] = None
    modified_on: Optional[AwareDatetime] = None

    @field_validator("origin_direct", mode="before")
    @classmethod
    def _null_origin_direct(cls, value: object) -> object:
        return [] if value is None else value

    @model_validator(mode="after")
    def _check_timestamps(self) -> SpectrumApp:
        # Persisted apps carry both timestamps, unsaved ones neither.
        if (self.created_on is None) != (self.modified_on is None):
            raise ValueError("created_on and modified_on must both be set or both be absent")
        return self
