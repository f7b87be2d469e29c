from .helpers import ensure_utc, format_deadline, parse_deadline, parse_iso_datetime

__all__ = ["ensure_utc", "format_deadline", "parse_deadline", "parse_iso_datetime"]
