from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ..core import Candidate


class HireRequest(BaseModel):
    """One hire request line: candidate data plus the sponsor to charge.

    Content checks (blank name, non-positive salary) are left to
    ``Candidate.validate`` so they surface as hiring errors.
    """

    name: str = ""
    email: str = ""
    annual_salary: Decimal = Decimal(0)
    sponsor: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")

    def to_candidate(self) -> Candidate:
        return Candidate(name=self.name, email=self.email, annual_salary=self.annual_salary)
