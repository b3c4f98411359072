"""Closed vocabularies used by channel scores and the tri-risk verdict."""

from __future__ import annotations

from enum import Enum


class RiskCategory(str, Enum):
    """Tri-risk verdict, ordered by severity: LOW < MEDIUM < HIGH."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskCategory):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RiskCategory):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RiskCategory):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RiskCategory):
            return NotImplemented
        return self.severity >= other.severity


_SEVERITY = {RiskCategory.LOW: 0, RiskCategory.MEDIUM: 1, RiskCategory.HIGH: 2}


class ConnectionType(str, Enum):
    RESIDENTIAL = "Residential"
    CORPORATE = "Corporate"
    EDUCATION = "Education"
    MOBILE = "Mobile"
    DATA_CENTER = "Data Center"

    @classmethod
    def parse(cls, raw: object) -> "ConnectionType | None":
        if raw is None:
            return None
        value = str(raw).strip()
        if not value:
            return None
        for member in cls:
            if member.value == value:
                return member
        return _CONNECTION_ALIASES.get(value.upper())


_CONNECTION_ALIASES = {
    "RESIDENTIAL": ConnectionType.RESIDENTIAL,
    "CORPORATE": ConnectionType.CORPORATE,
    "EDUCATION": ConnectionType.EDUCATION,
    "MOBILE": ConnectionType.MOBILE,
    "DATA CENTER": ConnectionType.DATA_CENTER,
    "DATA_CENTER": ConnectionType.DATA_CENTER,
    "DATACENTER": ConnectionType.DATA_CENTER,
}


class AbuseVelocity(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: object) -> "AbuseVelocity | None":
        if raw is None:
            return None
        value = str(raw).strip().lower()
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None
