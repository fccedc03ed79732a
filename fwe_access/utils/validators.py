# =======================================================================================
# fwe_access/utils/validators.py - Validation Helpers
# =======================================================================================
from typing import Optional


class TicketCodeValidator:
    """Normalizes scanned ticket codes so leading zeros never affect matching."""

    @staticmethod
    def normalize(code: Optional[str]) -> Optional[str]:
        """
        Strip surrounding whitespace and leading zeros.

        "007", "07" and "7" all normalize to "7". A code that is empty after
        trimming ("", "0", "000") normalizes to None and can never match.
        """
        if code is None:
            return None
        trimmed = code.strip().lstrip("0")
        return trimmed or None

    @staticmethod
    def trim_zeros_sql(dialect_name: str, column: str) -> str:
        """SQL expression removing leading zeros from `column` on the given dialect."""
        if dialect_name == "sqlite":
            return f"ltrim({column}, '0')"
        return f"TRIM(LEADING '0' FROM {column})"
