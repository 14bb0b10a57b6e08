"""
Constants Package

Whitelists and limits shared by the services and routes.
"""

from .validation import (
    LINEN_BRING_OWN,
    LINEN_RENT,
    VALID_LINEN_MODES,
    VALID_TRANSPORT_MODES,
    MAX_LINEN_SETS,
    MAX_LENGTHS,
)

__all__ = [
    'LINEN_BRING_OWN',
    'LINEN_RENT',
    'VALID_LINEN_MODES',
    'VALID_TRANSPORT_MODES',
    'MAX_LINEN_SETS',
    'MAX_LENGTHS',
]
