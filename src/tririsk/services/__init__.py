from tririsk.services.scoring import (
    EMAIL_CACHE_TTL_SECONDS,
    IP_CACHE_TTL_SECONDS,
    PHONE_CACHE_TTL_SECONDS,
    ChannelScoringService,
    ChannelSpec,
    EmailScoringService,
    IpScoringService,
    PhoneScoringService,
    ScoreOutcome,
)

__all__ = [
    "EMAIL_CACHE_TTL_SECONDS",
    "IP_CACHE_TTL_SECONDS",
    "PHONE_CACHE_TTL_SECONDS",
    "ChannelScoringService",
    "ChannelSpec",
    "EmailScoringService",
    "IpScoringService",
    "PhoneScoringService",
    "ScoreOutcome",
]
