"""Desktop entry point: python -m helixview"""
import sys

from helixview.app.main import main

if __name__ == "__main__":
    sys.exit(main())
