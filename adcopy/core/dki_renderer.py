"""DKI Renderer — Dynamic Keyword Insertion with a fixed fallback waterfall.

Invariants:
    - Template without a keyword token is returned verbatim, {DEFAULT:...} included
    - Waterfall order is fixed: direct -> compacted -> DEFAULT -> safe truncate
    - Compaction is NOT a fallback (used_fallback stays False)
    - fallback_reason is set iff used_fallback is True
    - Truncation result is never longer than max_length (max_length >= 0)
    - Never raises: empty template, empty keyword and max_length <= 0 all
      produce a best-effort RenderResult

Design Decisions:
    - Pure and stateless: batch rendering is a plain map, safe to parallelize
    - TRUNCATION_WORD_BOUNDARY_RATIO (0.7) is the single source of truth for
      the back-up-to-last-space heuristic
    - Stage 6 truncates the directly substituted keyword (not the compacted
      one): the cut shows the keyword the advertiser actually typed
"""

import re
from dataclasses import dataclass

from adcopy.core.domain_types import FallbackReason
from adcopy.core.dki_template import (
    detect_keyword_format,
    parse_template,
    replace_default_token,
    replace_keyword_token,
    strip_default_token,
)
from adcopy.core.keyword_format import compact_keyword, format_keyword


DEFAULT_MAX_LENGTH: int = 30
TRUNCATION_WORD_BOUNDARY_RATIO: float = 0.7

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class RenderResult:
    """Rendered headline plus how it was obtained."""
    rendered: str
    used_fallback: bool = False
    fallback_reason: FallbackReason | None = None

    def to_dict(self) -> dict:
        return {
            "rendered": self.rendered,
            "used_fallback": self.used_fallback,
            "fallback_reason": (
                self.fallback_reason.value if self.fallback_reason else None
            ),
        }


# === Public API ===============================================================

def render_dki(
    template: str, keyword: str, max_length: int = DEFAULT_MAX_LENGTH,
) -> RenderResult:
    """Render a DKI template, falling back until the result fits max_length."""
    parsed = parse_template(template)
    if not parsed.has_keyword_token:
        return RenderResult(rendered=template)

    mode = detect_keyword_format(template)
    formatted = format_keyword(keyword, mode)

    direct = _substitute(template, formatted)
    if len(direct) <= max_length:
        return RenderResult(rendered=direct)

    compacted = _substitute(template, format_keyword(compact_keyword(keyword), mode))
    if len(compacted) <= max_length:
        return RenderResult(rendered=compacted)

    if parsed.default_fallback:
        with_default = _render_default(template, parsed.default_fallback)
        if len(with_default) <= max_length:
            return RenderResult(
                rendered=with_default,
                used_fallback=True,
                fallback_reason=FallbackReason.USED_DEFAULT,
            )

    untrimmed = strip_default_token(replace_keyword_token(template, formatted))
    return RenderResult(
        rendered=safe_truncate(untrimmed, max_length),
        used_fallback=True,
        fallback_reason=FallbackReason.TRUNCATED,
    )


def render_dki_batch(
    template: str, keywords: list[str], max_length: int = DEFAULT_MAX_LENGTH,
) -> list[RenderResult]:
    """Render each keyword independently. Output order == input order."""
    return [render_dki(template, kw, max_length) for kw in keywords]


def safe_truncate(text: str, max_length: int) -> str:
    """Cut text to max_length, backing up to a space when one is near the end.

    Backs up only when the last space in the cut sits past
    TRUNCATION_WORD_BOUNDARY_RATIO of max_length; otherwise hard-cuts.
    """
    if len(text) <= max_length:
        return text

    truncated = text[:max(max_length, 0)]
    last_space = truncated.rfind(" ")
    if last_space > max_length * TRUNCATION_WORD_BOUNDARY_RATIO:
        return truncated[:last_space].strip()
    return truncated.strip()


# === Private helpers ==========================================================

def _substitute(template: str, keyword_text: str) -> str:
    """Fill the keyword token, discard the {DEFAULT:...} token, trim."""
    return strip_default_token(replace_keyword_token(template, keyword_text)).strip()


def _render_default(template: str, default_text: str) -> str:
    """Drop the keyword token, put the DEFAULT literal in its own slot."""
    text = replace_default_token(replace_keyword_token(template, ""), default_text)
    return _WHITESPACE_RUN.sub(" ", text).strip()
