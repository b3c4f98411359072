"""Cache-backed tri-risk fraud scoring over email, IP and phone quality scores."""

from tririsk.config.settings import IpqsConfig, load_config
from tririsk.core.errors import (
    ConfigError,
    InvalidEmailError,
    InvalidIpAddressError,
    InvalidPhoneNumberError,
    TransportError,
    TriRiskError,
    ValidationError,
)
from tririsk.domain import (
    AbuseVelocity,
    ConnectionType,
    EmailQualityScore,
    FraudEvaluationResult,
    IpQualityScore,
    PhoneQualityScore,
    RiskCategory,
)
from tririsk.domain.email.normalize import normalize_email
from tririsk.infra.cache import CacheStore, DictCache
from tririsk.orchestrator.evaluator import TriRiskEvaluator
from tririsk.services.scoring import EmailScoringService, IpScoringService, PhoneScoringService

__version__ = "1.0.0"

__all__ = [
    "AbuseVelocity",
    "CacheStore",
    "ConfigError",
    "ConnectionType",
    "DictCache",
    "EmailQualityScore",
    "EmailScoringService",
    "FraudEvaluationResult",
    "InvalidEmailError",
    "InvalidIpAddressError",
    "InvalidPhoneNumberError",
    "IpQualityScore",
    "IpScoringService",
    "IpqsConfig",
    "PhoneQualityScore",
    "PhoneScoringService",
    "RiskCategory",
    "TransportError",
    "TriRiskError",
    "TriRiskEvaluator",
    "ValidationError",
    "load_config",
    "normalize_email",
]
