"""Allow running as ``python -m sumcheck``."""

from sumcheck.cli.commands import app

if __name__ == "__main__":
    app()
