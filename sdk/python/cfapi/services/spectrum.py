"""Spectrum applications service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types.spectrum import SpectrumApp

if TYPE_CHECKING:
    from .._http import HttpClient


class SpectrumService:
    """Read Spectrum (TCP/UDP proxy) applications on a zone.

    API reference: https://developers.cloudflare.com/spectrum/api-reference/
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get(self, zone_id: str, app_id: str) -> SpectrumApp:
        """Fetch a single Spectrum application by ID."""
        return self._http.get(
            f"/zones/{zone_id}/spectrum/apps/{app_id}",
            SpectrumApp,
            operation="get_spectrum_app",
        )
