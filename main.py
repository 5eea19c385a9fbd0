#!/usr/bin/env python3
"""
Entry point for the Calculator application.

    python main.py

Log level and log file are taken from CALC_LOG_LEVEL and CALC_LOG_FILE.
"""
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so backend/ and frontend/ import when run as a script
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.logs import setup_logging
from frontend.gui import CalculatorGUI


def main():
    log = setup_logging()
    try:
        app = CalculatorGUI()
        app.mainloop()
    finally:
        log.info("Application closed")


if __name__ == "__main__":
    main()
