from __future__ import annotations

from dataclasses import replace
import logging
import os
import sys

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from helixview.config import (
    DEFAULT_GENERATION, DEFAULT_INTERACTION, GenerationSettings, InteractionSettings
)

logger = logging.getLogger(__name__)

ORG_ID = "helixview"
APP_ID = "helixview"
ORG_DOMAIN = "helixview.local"

VISIBLE_APP_NAME = "Helix View"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(QCoreApplication.translate("App", VISIBLE_APP_NAME))
    return app


def load_interaction_settings(settings: QSettings | None = None) -> InteractionSettings:
    """Interaction constants with overrides from the `view/*` keys of the INI file."""
    s = settings if settings is not None else QSettings()
    d = DEFAULT_INTERACTION
    try:
        return replace(
            d,
            drag_sensitivity=float(s.value("view/drag_sensitivity", d.drag_sensitivity)),
            autorotate_step_deg=float(s.value("view/autorotate_step_deg", d.autorotate_step_deg)),
            autorotate_interval_ms=int(s.value("view/autorotate_interval_ms", d.autorotate_interval_ms)),
            zoom_min=float(s.value("view/zoom_min", d.zoom_min)),
            zoom_max=float(s.value("view/zoom_max", d.zoom_max)),
        )
    except ValueError as e:
        logger.warning(f"Ignoring invalid view settings: {e}")
        return d


def load_generation_settings(settings: QSettings | None = None) -> GenerationSettings:
    """Generation constants with overrides from the `generation/*` keys of the INI file."""
    s = settings if settings is not None else QSettings()
    d = DEFAULT_GENERATION
    try:
        return replace(
            d,
            window_steps=int(s.value("generation/window_steps", d.window_steps)),
            default_position=int(s.value("generation/default_position", d.default_position)),
            stage_delay_ms=int(s.value("generation/stage_delay_ms", d.stage_delay_ms)),
        )
    except ValueError as e:
        logger.warning(f"Ignoring invalid generation settings: {e}")
        return d
