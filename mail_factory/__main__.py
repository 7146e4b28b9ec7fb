"""
Main entry point for running the package directly:

    python -m mail_factory
"""

from .cli import run

if __name__ == "__main__":
    run()
