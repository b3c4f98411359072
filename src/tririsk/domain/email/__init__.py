from tririsk.domain.email.normalize import normalize_email

__all__ = ["normalize_email"]
