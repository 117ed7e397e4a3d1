#!/usr/bin/env python3
"""
Casefix - Text Case Conversion Tool

Main entry point for the Casefix application.
Launches the PyQt5 GUI interface for live text case conversion.

Usage:
    python main.py

Requirements:
    - PyQt5
    - BeautifulSoup4 (HTML stripping in the formatting tool)
"""

import sys
import os

# Add the current directory to Python path for module imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def check_dependencies():
    """Check for required dependencies and provide helpful error messages."""
    missing_deps = []

    try:
        import PyQt5  # noqa: F401
    except ImportError:
        missing_deps.append("PyQt5")

    try:
        import bs4  # noqa: F401
    except ImportError:
        missing_deps.append("beautifulsoup4")

    if missing_deps:
        print("ERROR: Missing required dependencies:")
        for dep in missing_deps:
            print(f"  - {dep}")
        print("\nPlease install missing dependencies:")
        print(f"  pip install {' '.join(missing_deps)}")
        print("\nThen run the application again.")
        sys.exit(1)


def main():
    """Main application entry point."""
    from casefix import __version__

    print(f"Casefix v{__version__} - Text Case Conversion Tool")
    print("=" * 50)

    check_dependencies()

    try:
        from casefix.gui import main as gui_main
        gui_main()

    except ImportError as e:
        print(f"ERROR: Could not import Casefix modules: {e}")
        print("\nPlease ensure you're running from the correct directory")
        print("and that all required files are present.")
        sys.exit(1)


if __name__ == '__main__':
    main()
