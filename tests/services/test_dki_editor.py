"""DKI Editor Service tests — preview, apply-to-headline, Headline 1 toggle.

Tests cover:
    - preview renders every non-blank keyword line, rotation picks current row
    - preview uses settings.dki_max_length unless the request overrides it
    - preview raises BatchTooLargeError past settings.dki_max_batch_keywords
    - preview logs keyword/fallback counts
    - preview_ad_headlines renders the search-ad mockup headlines
    - apply_template validates index and template length
    - toggle_dki refuses over-limit Headline 1 and logs a warning
"""

import logging

import pytest

from adcopy.config import Settings
from adcopy.core.domain_types import FallbackReason
from adcopy.core.errors import (
    BatchTooLargeError,
    InvalidHeadlineIndexError,
    TemplateValidationError,
)
from adcopy.schemas.dki import DKIPreviewRequest
from adcopy.services.dki_editor import DKIEditorService


@pytest.fixture
def service(settings: Settings) -> DKIEditorService:
    return DKIEditorService(settings)


# ─── preview ─────────────────────────────────────────────────────

def test_preview_renders_each_keyword(service):
    response = service.preview(DKIPreviewRequest(
        template="Trade {KW} With CFI",
        keywords_text="forex\nstocks\n\ncryptocurrency\n",
    ))
    assert [r.rendered for r in response.results] == [
        "Trade Forex With CFI",
        "Trade Stocks With CFI",
        "Trade Cryptocurrency With CFI",
    ]
    assert response.total == 3
    assert response.has_issues is False
    assert response.max_length == 30


def test_preview_rotation_selects_current(service):
    response = service.preview(DKIPreviewRequest(
        template="Trade {KW} With CFI",
        keywords_text="forex\nstocks\ncryptocurrency",
        rotation=4,
    ))
    assert response.current_index == 1
    assert response.current.keyword == "stocks"


def test_preview_reports_fallbacks(service):
    response = service.preview(DKIPreviewRequest(
        template="Trade {KW} With CFI",
        keywords_text="forex\nforeign exchange currency markets",
    ))
    assert response.fallback_count == 1
    assert response.has_issues is True
    row = response.results[1]
    assert row.rendered == "Trade Foreign Exchange"
    assert row.fallback_reason == FallbackReason.TRUNCATED
    assert row.char_count == len("Trade Foreign Exchange")


def test_preview_request_max_length_overrides_settings(service):
    response = service.preview(DKIPreviewRequest(
        template="Get {kw} Deals",
        keywords_text="Shoes\nPremium Leather Boots For Winter",
        max_length=20,
    ))
    assert response.max_length == 20
    assert response.results[1].rendered == "Get premium leather"


def test_preview_empty_keyword_list(service):
    response = service.preview(DKIPreviewRequest(template="Trade {KW}"))
    assert response.results == []
    assert response.current_index is None
    assert response.current is None
    assert response.has_issues is False


def test_preview_rejects_oversized_batch():
    service = DKIEditorService(Settings(_env_file=None, dki_max_batch_keywords=2))
    with pytest.raises(BatchTooLargeError) as exc_info:
        service.preview(DKIPreviewRequest(
            template="Trade {KW}", keywords_text="a\nb\nc",
        ))
    assert exc_info.value.count == 3
    assert exc_info.value.context.keyword_count == 3


def test_preview_logs_counts(service, caplog):
    caplog.set_level(logging.INFO, logger="adcopy.services.dki_editor")
    service.preview(DKIPreviewRequest(
        template="Trade {KW} With CFI",
        keywords_text="forex\nforeign exchange currency markets",
    ))
    record = next(r for r in caplog.records if r.message == "DKI preview rendered")
    assert record.keyword_count == 2
    assert record.fallback_count == 1
    assert record.max_length == 30


def test_service_defaults_to_cached_settings(monkeypatch):
    monkeypatch.setenv("DKI_MAX_LENGTH", "12")
    service = DKIEditorService()
    assert service.settings.dki_max_length == 12


# ─── preview_ad_headlines ───────────────────────────────────────

def test_preview_ad_headlines(service):
    headlines = ["Trade {KW} Today", "", "Shop Now {DEFAULT:Deals}", "Low Spreads"]
    assert service.preview_ad_headlines(headlines) == [
        "Trade Premium Services Today", "Shop Now {DEFAULT:Deals}", "Low Spreads",
    ]


# ─── apply_template ──────────────────────────────────────────────

def test_apply_template_replaces_slot(service):
    headlines = ["Trade Forex", "Low Spreads", "Fast Execution"]
    assert service.apply_template(headlines, 0, "Trade {KW} With CFI") == [
        "Trade {KW} With CFI", "Low Spreads", "Fast Execution",
    ]
    assert headlines[0] == "Trade Forex"


def test_apply_template_rejects_missing_slot(service):
    with pytest.raises(InvalidHeadlineIndexError) as exc_info:
        service.apply_template(["H1", "H2"], 5, "Trade {KW}")
    assert exc_info.value.http_status == 404


def test_apply_template_rejects_negative_slot(service):
    with pytest.raises(InvalidHeadlineIndexError):
        service.apply_template(["H1"], -1, "Trade {KW}")


def test_apply_template_rejects_over_limit_template(service):
    with pytest.raises(TemplateValidationError) as exc_info:
        service.apply_template(["H1"], 0, "x" * 31)
    assert exc_info.value.field == "template"


# ─── toggle_dki ──────────────────────────────────────────────────

def test_toggle_enables_for_short_headline(service):
    response = service.toggle_dki(["Trade {KW} With CFI"], True)
    assert response.enabled is True
    assert response.error_code is None


def test_toggle_enables_without_headlines(service):
    assert service.toggle_dki([], True).enabled is True


def test_toggle_refuses_long_headline(service, caplog):
    caplog.set_level(logging.WARNING, logger="adcopy.services.dki_editor")
    response = service.toggle_dki(["x" * 35, "H2"], True)
    assert response.requested is True
    assert response.enabled is False
    assert response.error_code == "HEADLINE_TOO_LONG"
    assert any(r.error_code == "HEADLINE_TOO_LONG" for r in caplog.records)


def test_toggle_disable_always_succeeds(service):
    response = service.toggle_dki(["x" * 35], False)
    assert response.requested is False
    assert response.enabled is False
    assert response.error_code is None
