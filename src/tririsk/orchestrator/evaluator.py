"""Tri-risk evaluation over the email, IP and phone scoring services."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from tririsk.config.settings import IpqsConfig
from tririsk.domain.result import FraudEvaluationResult
from tririsk.domain.scores import EmailQualityScore, IpQualityScore, PhoneQualityScore
from tririsk.infra.cache import CacheStore
from tririsk.orchestrator.fusion import aggregate
from tririsk.providers.ipqs import EmailClient, IpClient, PhoneClient
from tririsk.providers.transport import HttpTransport
from tririsk.services.scoring import EmailScoringService, IpScoringService, PhoneScoringService

logger = logging.getLogger(__name__)


class TriRiskEvaluator:
    """Collect up to three channel scores and fuse them into one verdict.

    Pre-fetched scores win over raw identifiers. The IP channel needs both an
    address and a user agent. A channel that yields nothing simply does not
    contribute; only malformed caller input raises.
    """

    def __init__(
        self,
        email_service: EmailScoringService | None = None,
        ip_service: IpScoringService | None = None,
        phone_service: PhoneScoringService | None = None,
    ) -> None:
        self.email_service = email_service
        self.ip_service = ip_service
        self.phone_service = phone_service

    @classmethod
    def from_config(
        cls,
        config: IpqsConfig,
        cache: CacheStore,
        *,
        transport: HttpTransport | None = None,
    ) -> "TriRiskEvaluator":
        return cls(
            email_service=EmailScoringService(EmailClient(config, transport), cache),
            ip_service=IpScoringService(IpClient(config, transport), cache),
            phone_service=PhoneScoringService(PhoneClient(config, transport), cache),
        )

    def _email(self, email: str | None, prefetched: EmailQualityScore | None) -> EmailQualityScore | None:
        if prefetched is not None:
            return prefetched
        if email is None or self.email_service is None:
            return None
        return self.email_service.score(email)

    def _ip(
        self,
        ip_address: str | None,
        user_agent: str | None,
        options: Mapping[str, Any] | None,
        prefetched: IpQualityScore | None,
    ) -> IpQualityScore | None:
        if prefetched is not None:
            return prefetched
        if ip_address is None or user_agent is None or self.ip_service is None:
            if ip_address is not None and user_agent is None:
                logger.debug("ip channel skipped: user agent missing")
            return None
        return self.ip_service.score(ip_address, user_agent, options)

    def _phone(
        self,
        phone_number: str | None,
        country: str | None,
        prefetched: PhoneQualityScore | None,
    ) -> PhoneQualityScore | None:
        if prefetched is not None:
            return prefetched
        if phone_number is None or self.phone_service is None:
            return None
        return self.phone_service.score(phone_number, country)

    def evaluate(
        self,
        *,
        email: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        phone_number: str | None = None,
        phone_country: str | None = None,
        email_score: EmailQualityScore | None = None,
        ip_score: IpQualityScore | None = None,
        phone_score: PhoneQualityScore | None = None,
        ip_options: Mapping[str, Any] | None = None,
    ) -> FraudEvaluationResult:
        resolved_email = self._email(email, email_score)
        resolved_ip = self._ip(ip_address, user_agent, ip_options, ip_score)
        resolved_phone = self._phone(phone_number, phone_country, phone_score)

        result = aggregate(email_score=resolved_email, ip_score=resolved_ip, phone_score=resolved_phone)
        logger.info(
            "tri-risk evaluated category=%s avg_score=%s channels=%s",
            result.risk_category.value,
            result.avg_score,
            ",".join(result.contributing_channels) or "none",
        )
        return result
