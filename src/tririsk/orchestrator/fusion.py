"""Tri-risk fusion: average the channel scores, bucket, apply IP overrides."""

from __future__ import annotations

from typing import Any, Iterable

from tririsk.domain.enums import RiskCategory
from tririsk.domain.result import FraudEvaluationResult
from tririsk.domain.scores import EmailQualityScore, IpQualityScore, PhoneQualityScore

LOW_MAX_AVG = 50
MEDIUM_MAX_AVG = 75
IP_ELEVATE_TO_MEDIUM = 75
IP_ELEVATE_TO_HIGH = 88


def average_score(scores: Iterable[int]) -> int:
    values = list(scores)
    if not values:
        return 0
    return sum(values) // len(values)


def category_for_average(avg_score: int) -> RiskCategory:
    if avg_score <= LOW_MAX_AVG:
        return RiskCategory.LOW
    if avg_score <= MEDIUM_MAX_AVG:
        return RiskCategory.MEDIUM
    return RiskCategory.HIGH


def apply_ip_overrides(category: RiskCategory, ip_fraud_score: int | None) -> RiskCategory:
    """Raise the category on a risky IP; both steps may fire in sequence."""

    if ip_fraud_score is None:
        return category
    if category is RiskCategory.LOW and ip_fraud_score >= IP_ELEVATE_TO_MEDIUM:
        category = RiskCategory.MEDIUM
    if category is RiskCategory.MEDIUM and ip_fraud_score >= IP_ELEVATE_TO_HIGH:
        category = RiskCategory.HIGH
    return category


def ip_metadata(ip_score: IpQualityScore | None) -> dict[str, Any]:
    if ip_score is None:
        return {}
    return {
        "ip": {
            "countryCode": ip_score.country_code,
            "proxy": ip_score.proxy,
            "vpn": ip_score.vpn,
            "tor": ip_score.tor,
            "connectionType": ip_score.connection_type.value if ip_score.connection_type else None,
            "abuseVelocity": ip_score.abuse_velocity.value if ip_score.abuse_velocity else None,
        }
    }


def aggregate(
    *,
    email_score: EmailQualityScore | None = None,
    ip_score: IpQualityScore | None = None,
    phone_score: PhoneQualityScore | None = None,
) -> FraudEvaluationResult:
    contributing = [score.fraud_score for score in (email_score, ip_score, phone_score) if score is not None]
    if not contributing:
        return FraudEvaluationResult(risk_category=RiskCategory.LOW, avg_score=0)

    avg = average_score(contributing)
    ip_fraud_score = ip_score.fraud_score if ip_score is not None else None
    category = apply_ip_overrides(category_for_average(avg), ip_fraud_score)
    return FraudEvaluationResult(
        risk_category=category,
        avg_score=avg,
        email_fraud_score=email_score.fraud_score if email_score is not None else None,
        ip_fraud_score=ip_fraud_score,
        phone_fraud_score=phone_score.fraud_score if phone_score is not None else None,
        metadata=ip_metadata(ip_score),
    )
