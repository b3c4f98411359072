"""Cache-aside scoring shared by the email, IP and phone channels."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Mapping, TypeVar

from pydantic import ValidationError as ModelValidationError

from tririsk.domain.email.normalize import normalize_email
from tririsk.domain.scores import ChannelScore, EmailQualityScore, IpQualityScore, PhoneQualityScore
from tririsk.domain.validation import (
    validate_country,
    validate_email,
    validate_ip_address,
    validate_phone_number,
)
from tririsk.infra.cache import CacheStore
from tririsk.providers.ipqs import ClientResult, EmailClient, IpClient, PhoneClient

logger = logging.getLogger(__name__)

DAY_SECONDS = 86_400
EMAIL_CACHE_TTL_SECONDS = 90 * DAY_SECONDS
PHONE_CACHE_TTL_SECONDS = 90 * DAY_SECONDS
# IPs get reassigned often, so their scores go stale much faster.
IP_CACHE_TTL_SECONDS = 3 * DAY_SECONDS

ScoreT = TypeVar("ScoreT", bound=ChannelScore)


@dataclass(frozen=True)
class ChannelSpec(Generic[ScoreT]):
    channel: str
    ttl_seconds: int
    model: type[ScoreT]

    def cache_key(self, identifier: str) -> str:
        return f"fraud:{self.channel}:{identifier}"


@dataclass(frozen=True)
class ScoreOutcome(Generic[ScoreT]):
    """Either a score with where it came from, or the reason there is none."""

    score: ScoreT | None = None
    source: str | None = None
    reason: str | None = None

    @property
    def found(self) -> bool:
        return self.score is not None

    @classmethod
    def absent(cls, reason: str) -> "ScoreOutcome[ScoreT]":
        return cls(reason=reason)


class ChannelScoringService(Generic[ScoreT]):
    """Check cache, call the vendor on a miss, map and store the result.

    Only input validation raises. Vendor, transport, mapping and cache
    failures all end up as an absent ``ScoreOutcome``, or are logged and
    ignored when the score itself is fine.
    """

    spec: ChannelSpec[ScoreT]

    def __init__(self, client: Any, cache: CacheStore) -> None:
        self.client = client
        self.cache = cache

    def _read_cache(self, key: str, identifier: str) -> ScoreT | None:
        channel = self.spec.channel
        try:
            cached = self.cache.get(key)
        except Exception as exc:  # noqa: BLE001 - a broken cache degrades to a miss
            logger.warning("%s cache read failed key=%s error=%s", channel, key, exc)
            return None
        if cached is None:
            return None

        score = self._coerce_cached(cached)
        if score is not None and score.subject_identifier == identifier:
            logger.debug("%s cache hit key=%s", channel, key)
            return score

        logger.warning("%s cache corruption, deleting key=%s cached_type=%s", channel, key, type(cached).__name__)
        try:
            self.cache.delete(key)
        except Exception as exc:  # noqa: BLE001
            logger.warning("%s cache delete failed key=%s error=%s", channel, key, exc)
        return None

    def _coerce_cached(self, cached: object) -> ScoreT | None:
        model = self.spec.model
        if isinstance(cached, model):
            return cached
        # Serialising stores hand back plain mappings.
        if isinstance(cached, Mapping):
            try:
                return model.model_validate(dict(cached))
            except ModelValidationError:
                return None
        return None

    def _write_cache(self, key: str, score: ScoreT) -> None:
        channel = self.spec.channel
        try:
            stored = self.cache.set(key, score, self.spec.ttl_seconds)
        except Exception as exc:  # noqa: BLE001 - the fresh score is still returned
            logger.warning("%s failed to cache result key=%s error=%s", channel, key, exc)
            return
        if stored is False:
            logger.warning("%s cache rejected result key=%s", channel, key)

    def _resolve(self, identifier: str, fetch: Callable[[], ClientResult]) -> ScoreOutcome[ScoreT]:
        channel = self.spec.channel
        key = self.spec.cache_key(identifier)

        cached = self._read_cache(key, identifier)
        if cached is not None:
            return ScoreOutcome(score=cached, source="cache")

        logger.debug("%s cache miss, calling vendor key=%s", channel, key)
        result = fetch()
        if not result.ok:
            logger.error("%s vendor lookup returned no payload identifier=%s reason=%s", channel, identifier, result.error)
            return ScoreOutcome.absent(result.error or "no_payload")

        payload = result.payload or {}
        if payload.get("success") is not True:
            logger.error(
                "%s vendor returned success=false identifier=%s message=%s",
                channel,
                identifier,
                payload.get("message", "unknown"),
            )
            return ScoreOutcome.absent("vendor_rejected")

        try:
            score = self.spec.model.from_api_response(identifier, payload)
        except (ModelValidationError, TypeError, ValueError, OverflowError) as exc:
            logger.error("%s failed to map vendor response identifier=%s error=%s", channel, identifier, exc)
            return ScoreOutcome.absent("mapping_failed")

        self._write_cache(key, score)
        return ScoreOutcome(score=score, source="vendor")


class EmailScoringService(ChannelScoringService[EmailQualityScore]):
    spec = ChannelSpec("email", EMAIL_CACHE_TTL_SECONDS, EmailQualityScore)

    def __init__(self, client: EmailClient, cache: CacheStore) -> None:
        super().__init__(client, cache)

    def lookup(self, email: str) -> ScoreOutcome[EmailQualityScore]:
        identifier = normalize_email(validate_email(email))
        return self._resolve(identifier, lambda: self.client.score_raw(identifier))

    def score(self, email: str) -> EmailQualityScore | None:
        return self.lookup(email).score


class IpScoringService(ChannelScoringService[IpQualityScore]):
    spec = ChannelSpec("ip", IP_CACHE_TTL_SECONDS, IpQualityScore)

    def __init__(self, client: IpClient, cache: CacheStore) -> None:
        super().__init__(client, cache)

    def lookup(
        self,
        ip_address: str,
        user_agent: str,
        options: Mapping[str, Any] | None = None,
    ) -> ScoreOutcome[IpQualityScore]:
        identifier = validate_ip_address(ip_address)
        params: dict[str, Any] = {"user_agent": user_agent}
        params.update(options or {})
        return self._resolve(identifier, lambda: self.client.score_raw(identifier, params))

    def score(
        self,
        ip_address: str,
        user_agent: str,
        options: Mapping[str, Any] | None = None,
    ) -> IpQualityScore | None:
        return self.lookup(ip_address, user_agent, options).score


class PhoneScoringService(ChannelScoringService[PhoneQualityScore]):
    spec = ChannelSpec("phone", PHONE_CACHE_TTL_SECONDS, PhoneQualityScore)

    def __init__(self, client: PhoneClient, cache: CacheStore) -> None:
        super().__init__(client, cache)

    def lookup(self, phone_number: str, country: str | None = None) -> ScoreOutcome[PhoneQualityScore]:
        identifier = validate_phone_number(phone_number)
        # Cache key is the number alone; country only steers the vendor call.
        country = validate_country(country) if country is not None else None
        return self._resolve(identifier, lambda: self.client.score_raw(identifier, country))

    def score(self, phone_number: str, country: str | None = None) -> PhoneQualityScore | None:
        return self.lookup(phone_number, country).score
