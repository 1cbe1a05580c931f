"""adcopy entry point — wires settings and logging, hands out the editor service.

Invariants:
    - Logging configured from settings (log_level, log_format), never hardcoded
    - create_app() is the single startup path for embedding applications

Design Decisions:
    - Plain factory over module-level singleton: no import side-effects, each
      caller decides when startup happens
"""

import logging

from adcopy.config import Settings, get_settings
from adcopy.infrastructure.observability import setup_logging
from adcopy.services.dki_editor import DKIEditorService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> DKIEditorService:
    """Configure logging and build the DKI editor service."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "adcopy editor started", extra={"max_length": settings.dki_max_length},
    )
    return DKIEditorService(settings)
