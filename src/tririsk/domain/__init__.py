"""Domain types for channel scores and tri-risk verdicts."""

from tririsk.domain.enums import AbuseVelocity, ConnectionType, RiskCategory
from tririsk.domain.result import FraudEvaluationResult
from tririsk.domain.scores import ChannelScore, EmailQualityScore, IpQualityScore, PhoneQualityScore

__all__ = [
    "AbuseVelocity",
    "ChannelScore",
    "ConnectionType",
    "EmailQualityScore",
    "FraudEvaluationResult",
    "IpQualityScore",
    "PhoneQualityScore",
    "RiskCategory",
]
