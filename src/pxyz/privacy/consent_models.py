"""
Consent signal models for privacy passthrough.

The adapter does not decode consent strings. It forwards the GDPR
TCF string and the applicability flag to the partner unchanged.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class GdprConsent:
    """
    GDPR consent context supplied by the host's consent management module.

    Attributes:
        consent_string: Raw TCF consent string, forwarded as-is
        gdpr_applies: Whether GDPR applies; None when the CMP did not say
    """
    consent_string: Optional[str] = None
    gdpr_applies: Optional[bool] = None

    @property
    def gdpr_signal(self) -> int:
        """
        OpenRTB regs.ext.gdpr value.

        An unknown applicability is signalled as 0, same as an explicit False.
        """
        return 1 if self.gdpr_applies else 0

    def to_user_ext(self) -> dict[str, Any]:
        """Build the user.ext object carrying the consent string."""
        return {"consent": self.consent_string}

    def to_regs_ext(self) -> dict[str, Any]:
        """Build the regs.ext object carrying the GDPR flag."""
        return {"gdpr": self.gdpr_signal}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the host framework's keys."""
        result: dict[str, Any] = {}
        if self.consent_string is not None:
            result["consentString"] = self.consent_string
        if self.gdpr_applies is not None:
            result["gdprApplies"] = self.gdpr_applies
        return result

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional["GdprConsent"]:
        """Create from the host's gdprConsent object, or None when absent."""
        if data is None:
            return None
        gdpr_applies = data.get("gdprApplies", data.get("gdpr_applies"))
        return cls(
            consent_string=data.get("consentString", data.get("consent_string")),
            gdpr_applies=None if gdpr_applies is None else bool(gdpr_applies),
        )
