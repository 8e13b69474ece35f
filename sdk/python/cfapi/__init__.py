"""cfapi: typed Python client for Cloudflare Access identity providers and Spectrum apps."""

from ._http import decode_envelope
from .client import CloudflareClient
from .config import Settings
from .exceptions import (
    ApiError,
    AuthenticationError,
    CloudflareError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .types import Envelope, IdentityProvider, SpectrumApp

__all__ = [
    "CloudflareClient",
    "Settings",
    "Envelope",
    "IdentityProvider",
    "SpectrumApp",
    "decode_envelope",
    "CloudflareError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "RateLimitError",
]
