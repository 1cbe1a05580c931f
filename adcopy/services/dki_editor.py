"""DKI Editor Service — preview, apply-to-headline and Headline 1 toggle.

Invariants:
    - Rendering delegated to core/dki_renderer (never raises)
    - Batch size capped by settings.dki_max_batch_keywords (BatchTooLargeError)
    - apply_template validates the slot index (InvalidHeadlineIndexError) and the
      template length against settings.headline_char_limit (TemplateValidationError)
    - toggle_dki never raises: an ineligible headline yields enabled=False
    - preview_ad_headlines fills DKI headlines with the sample keyword, max 3 shown

Design Decisions:
    - Imperative shell over pure core: this module owns logging and error raising,
      core modules return values and error descriptors
    - Settings injected (defaults to get_settings()): tests pass explicit Settings
"""

import logging

from adcopy.config import Settings, get_settings
from adcopy.core.dki_preview import (
    apply_template,
    is_valid_headline_index,
    parse_keyword_lines,
    render_ad_preview_headlines,
    select_rotation,
    summarize_batch,
)
from adcopy.core.dki_renderer import render_dki_batch
from adcopy.core.enforce_headline import check_dki_eligibility
from adcopy.core.errors import (
    BatchTooLargeError,
    ErrorContext,
    InvalidHeadlineIndexError,
    TemplateValidationError,
)
from adcopy.schemas.dki import (
    DKIPreviewRequest,
    DKIPreviewResponse,
    DKIToggleResponse,
    RenderedHeadline,
)

logger = logging.getLogger(__name__)


class DKIEditorService:
    """Backs the DKI template editor panel."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def preview(self, request: DKIPreviewRequest) -> DKIPreviewResponse:
        """Render every test keyword and pick the rotated current one."""
        keywords = parse_keyword_lines(request.keywords_text)
        limit = self.settings.dki_max_batch_keywords
        if len(keywords) > limit:
            raise BatchTooLargeError(
                len(keywords), limit,
                ErrorContext(template=request.template, keyword_count=len(keywords)),
            )

        max_length = (
            request.max_length if request.max_length is not None
            else self.settings.dki_max_length
        )
        results = render_dki_batch(request.template, keywords, max_length)
        summary = summarize_batch(keywords, results, max_length)

        logger.info(
            "DKI preview rendered",
            extra={
                "keyword_count": summary["total"],
                "fallback_count": summary["fallback_count"],
                "max_length": max_length,
            },
        )
        return DKIPreviewResponse(
            template=request.template,
            max_length=max_length,
            results=[RenderedHeadline(**row) for row in summary["rows"]],
            current_index=select_rotation(results, request.rotation),
            total=summary["total"],
            fallback_count=summary["fallback_count"],
            has_issues=summary["has_issues"],
        )

    def preview_ad_headlines(self, headlines: list[str]) -> list[str]:
        """Headlines for the search-ad mockup, DKI filled with the sample keyword."""
        shown = render_ad_preview_headlines(headlines)
        logger.debug("Ad preview shows %d headline(s)", len(shown))
        return shown

    def apply_template(
        self, headlines: list[str], index: int, template: str,
    ) -> list[str]:
        """Write the template into headline slot `index`. Returns new list."""
        if not is_valid_headline_index(headlines, index):
            raise InvalidHeadlineIndexError(
                index, len(headlines), ErrorContext(template=template),
            )
        char_limit = self.settings.headline_char_limit
        if len(template) > char_limit:
            raise TemplateValidationError(
                f"Template is {len(template)} characters; headlines allow {char_limit}.",
                field="template",
                context=ErrorContext(template=template),
            )
        return apply_template(headlines, index, template)

    def toggle_dki(self, headlines: list[str], requested: bool) -> DKIToggleResponse:
        """Enable/disable DKI on Headline 1; refuses when it is too long."""
        if not requested:
            return DKIToggleResponse(requested=False, enabled=False)

        headline = headlines[0] if headlines else ""
        error = check_dki_eligibility(headline, self.settings.headline_char_limit)
        if error:
            logger.warning(
                "DKI refused for Headline 1: %s", error["message"],
                extra={"error_code": error["error_code"]},
            )
            return DKIToggleResponse(
                requested=True,
                enabled=False,
                error_code=error["error_code"],
                message=error["message"],
            )
        return DKIToggleResponse(requested=True, enabled=True)
