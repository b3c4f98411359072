"""Tri-risk evaluation output and its wire form."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tririsk.domain.enums import RiskCategory


class FraudEvaluationResult(BaseModel):
    """Combined verdict over whichever channel scores were obtained.

    Channel fields are ``None`` when that channel contributed nothing, which is
    different from a score of zero. ``metadata`` only carries IP details.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    risk_category: RiskCategory = RiskCategory.LOW
    avg_score: int = Field(default=0, ge=0, le=100)
    email_fraud_score: int | None = None
    ip_fraud_score: int | None = None
    phone_fraud_score: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def contributing_channels(self) -> list[str]:
        channels = {
            "email": self.email_fraud_score,
            "ip": self.ip_fraud_score,
            "phone": self.phone_fraud_score,
        }
        return [name for name, score in channels.items() if score is not None]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
