"""
Privacy Module - GDPR consent passthrough.
"""

from src.pxyz.privacy.consent_models import GdprConsent

__all__ = [
    'GdprConsent',
]
