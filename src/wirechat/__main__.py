"""wirechat CLI bootstrap."""

from __future__ import annotations

from wirechat.cli.app import app

if __name__ == "__main__":
    app()
