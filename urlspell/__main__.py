"""Allow ``python -m urlspell``."""

from urlspell.cli import app

if __name__ == "__main__":
    app()
