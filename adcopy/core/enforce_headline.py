"""Headline DKI Enforcement — Headline 1 may use DKI only within the char limit.

Invariants:
    - check_dki_eligibility is PURE: returns None (ok) or an error descriptor
    - HEADLINE_CHAR_LIMIT (30) is single source of truth for the default limit

Design Decisions:
    - Error descriptor dict over exception: the shell decides whether to warn
      or raise, the core only reports
"""


HEADLINE_CHAR_LIMIT: int = 30


def check_dki_eligibility(headline: str, limit: int = HEADLINE_CHAR_LIMIT) -> dict | None:
    """DKI needs the headline to fit the limit. Empty headline is eligible."""
    length = len(headline)
    if length <= limit:
        return None
    return {
        "status": "error",
        "error_code": "HEADLINE_TOO_LONG",
        "length": length,
        "limit": limit,
        "message": (
            f"Headline 1 is {length} characters. DKI requires ≤{limit} characters. "
            "Please shorten your headline to enable DKI."
        ),
    }
