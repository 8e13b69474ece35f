from .access import AccessIdentityProvidersService
from .spectrum import SpectrumService

__all__ = [
    "AccessIdentityProvidersService",
    "SpectrumService",
]
