"""DKI Schemas — Pydantic models for the template editor boundary.

Invariants:
    - DKIPreviewRequest.template: at most 500 chars (may be empty)
    - DKIPreviewRequest.rotation: >= 0
    - max_length None means "use settings.dki_max_length"
    - Response rows mirror RenderResult plus per-row char counts

Design Decisions:
    - max_length is NOT bounded below: the renderer accepts max_length <= 0
      and degrades to truncation, the boundary does not second-guess it
    - fallback_reason typed as FallbackReason: serializes to its literal text
"""

from pydantic import BaseModel, Field

from adcopy.core.domain_types import FallbackReason


class DKIPreviewRequest(BaseModel):
    """Template plus one-keyword-per-line test list."""
    template: str = Field(max_length=500)
    keywords_text: str = Field("", max_length=50_000)
    rotation: int = Field(0, ge=0)
    max_length: int | None = None


class RenderedHeadline(BaseModel):
    """One keyword's rendered headline."""
    keyword: str
    rendered: str
    char_count: int
    used_fallback: bool
    fallback_reason: FallbackReason | None = None
    over_limit: bool = False


class DKIPreviewResponse(BaseModel):
    """Live preview: all rows, the rotated current row, fallback totals."""
    template: str
    max_length: int
    results: list[RenderedHeadline]
    current_index: int | None = None
    total: int
    fallback_count: int
    has_issues: bool

    @property
    def current(self) -> RenderedHeadline | None:
        if self.current_index is None:
            return None
        return self.results[self.current_index]


class DKIToggleResponse(BaseModel):
    """Effective DKI state for Headline 1 after a toggle request."""
    requested: bool
    enabled: bool
    error_code: str | None = None
    message: str | None = None
