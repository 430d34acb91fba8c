"""
Main entry point for running the package directly.

    python -m todocat
"""

from todocat.server import main

if __name__ == "__main__":
    main()
