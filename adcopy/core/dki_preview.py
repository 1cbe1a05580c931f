"""DKI Preview — pure helpers behind the template editor's live preview.

Invariants:
    - parse_keyword_lines keeps lines as typed; only blank lines are dropped
    - summarize_batch requires len(keywords) == len(results) (zip is strict)
    - apply_template returns a NEW list — input never mutated
    - select_rotation wraps modulo batch size; empty batch -> None
    - render_ad_preview_headlines shows at most AD_PREVIEW_HEADLINE_LIMIT (3)
      non-blank headlines, in input order

Design Decisions:
    - Summary is a flat dict (JSON-serializable) so the shell can hand it to
      the response schema without custom encoders
"""

from adcopy.core.dki_renderer import RenderResult, render_dki


SAMPLE_PREVIEW_KEYWORD: str = "Premium Services"
AD_PREVIEW_HEADLINE_LIMIT: int = 3

_DKI_MARKERS = ("{KW}", "{kw}", "{Kw}", "{DEFAULT:")


def parse_keyword_lines(text: str) -> list[str]:
    """Split the one-keyword-per-line textarea, skipping blank lines."""
    return [line for line in text.split("\n") if line.strip()]


def select_rotation(results: list[RenderResult], rotation: int) -> int | None:
    """Index of the keyword shown by the "Next Keyword" preview."""
    if not results:
        return None
    return rotation % len(results)


def summarize_batch(
    keywords: list[str], results: list[RenderResult], max_length: int,
) -> dict:
    """Per-keyword rows plus fallback totals for the editor."""
    rows = []
    for keyword, result in zip(keywords, results, strict=True):
        rows.append({
            **result.to_dict(),
            "keyword": keyword,
            "char_count": len(result.rendered),
            "over_limit": len(result.rendered) > max_length,
        })
    fallback_count = sum(1 for r in results if r.used_fallback)
    return {
        "total": len(results),
        "fallback_count": fallback_count,
        "has_issues": fallback_count > 0,
        "rows": rows,
    }


def is_valid_headline_index(headlines: list[str], index: int) -> bool:
    """True when `index` names an existing headline slot."""
    return 0 <= index < len(headlines)


def apply_template(headlines: list[str], index: int, template: str) -> list[str]:
    """Copy of headlines with slot `index` set to the template."""
    updated = list(headlines)
    updated[index] = template
    return updated


def render_ad_preview_headlines(
    headlines: list[str],
    sample_keyword: str = SAMPLE_PREVIEW_KEYWORD,
    limit: int = AD_PREVIEW_HEADLINE_LIMIT,
) -> list[str]:
    """Headlines as the search-ad mockup shows them.

    Headlines with DKI markup are rendered with the sample keyword, the rest
    pass through. Blank results are dropped, then the list is capped.
    """
    rendered = [
        render_dki(h, sample_keyword).rendered if _has_dki_markup(h) else h
        for h in headlines
    ]
    return [h for h in rendered if h.strip()][:limit]


def _has_dki_markup(headline: str) -> bool:
    return any(marker in headline for marker in _DKI_MARKERS)
