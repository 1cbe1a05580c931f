"""Domain Types — enums shared by the DKI core.

Invariants:
    - KeywordFormat values are the exact token bodies: KW, kw, Kw
    - FallbackReason values are the exact user-facing reason strings
    - All valid states encoded as Enums — no raw string matching in callers

Design Decisions:
    - str Enums: compare equal to their literal and serialize to JSON without
      custom encoders (the editor UI renders reasons verbatim)
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class KeywordFormat(str, Enum):
    """Casing applied to the inserted keyword, named by its token."""
    TITLE = "KW"        # Title Case
    LOWER = "kw"        # lowercase
    SENTENCE = "Kw"     # Sentence case


class FallbackReason(str, Enum):
    """Why a render left the direct/compacted substitution path."""
    USED_DEFAULT = "Keyword too long, used DEFAULT"
    TRUNCATED = "Truncated to fit character limit"
