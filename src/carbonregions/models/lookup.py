# src/carbonregions/models/lookup.py
"""
Shared outcome type for the carbon data lookups.

Both providers answer "not found" when they have no data for a location.
That is a valid result, distinct from a failed request, so every lookup
returns one of FOUND, NO_COVERAGE or FAILURE.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import ProviderError


class LookupStatus(str, Enum):
    FOUND = "found"
    NO_COVERAGE = "no_coverage"
    FAILURE = "failure"


class LookupResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider: str = Field(..., description="Provider that answered the lookup.")
    status: LookupStatus
    code: str = Field("", description="Zone or region code when found.")
    status_code: Optional[int] = Field(None, description="HTTP status of a failed lookup.")
    reason: Optional[str] = Field(None, description="Why the lookup failed.")

    @classmethod
    def found(cls, provider: str, code: str) -> "LookupResult":
        if not code:
            return cls.no_coverage(provider)
        return cls(provider=provider, status=LookupStatus.FOUND, code=code)

    @classmethod
    def no_coverage(cls, provider: str) -> "LookupResult":
        return cls(provider=provider, status=LookupStatus.NO_COVERAGE)

    @classmethod
    def failure(cls, provider: str, status_code: int = None, reason: str = None) -> "LookupResult":
        if reason is None:
            reason = f"expected 200 response got {status_code}"
        return cls(provider=provider, status=LookupStatus.FAILURE, status_code=status_code, reason=reason)

    def code_or_raise(self) -> str:
        """
        Returns the code, an empty string for no coverage, or raises
        ProviderError for a failed lookup.
        """
        if self.status == LookupStatus.FAILURE:
            raise ProviderError(self.provider, status_code=self.status_code, reason=self.reason)
        return self.code
