"""
Application Initialization
==========================
Run with: python -m helixview

It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Creates the QApplication and reads user settings.
3. Instantiates the Main Window and starts the Qt Event Loop.
"""
from __future__ import annotations

import sys

from helixview.app.application import create_app, load_generation_settings, load_interaction_settings
from helixview.logging_config import setup_logging
from helixview.view.main_window import MainWindow


def main() -> int:
    """Main entry point for the application."""
    # HELIXVIEW_LOG_LEVEL=DEBUG logs every generated scene
    setup_logging()

    app = create_app()
    win = MainWindow(
        generation=load_generation_settings(),
        interaction=load_interaction_settings(),
    )
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
