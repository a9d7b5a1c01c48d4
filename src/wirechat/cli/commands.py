"""Local command detection."""

from __future__ import annotations

from dataclasses import dataclass

EXIT_COMMANDS = frozenset({"exit"})
HELP_COMMANDS = frozenset({"/help"})


@dataclass(frozen=True)
class LocalCommand:
    """Input handled by the client itself instead of the server."""

    name: str  # exit|help
    raw: str


def detect_local_command(line: str) -> LocalCommand | None:
    """Detect whether one input line is a client-side command."""

    stripped = line.strip()
    lowered = stripped.lower()
    if lowered in EXIT_COMMANDS:
        return LocalCommand(name="exit", raw=stripped)
    if lowered in HELP_COMMANDS:
        return LocalCommand(name="help", raw=stripped)
    return None
