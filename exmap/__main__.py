"""Allow ``python -m exmap``."""

from exmap.cli import app

if __name__ == "__main__":
    app()
