"""Command-line options for the quiz player entry point."""

from __future__ import annotations

import argparse
import os

from quiz_player.constants.network_constants import (
    API_URL_ENV_VAR,
    DEFAULT_API_URL,
    PARTICIPANT_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
)


def parse_timeout(raw_value: str) -> float | None:
    """Convert a timeout option to seconds; an empty value means no timeout."""
    if not raw_value.strip():
        return None
    try:
        seconds = float(raw_value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid timeout value: {raw_value!r}") from exc
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive: {raw_value!r}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Take a timed quiz from the quiz backend.")
    parser.add_argument("quiz_id", help="Identifier of the quiz to play")
    parser.add_argument(
        "--user",
        default=os.environ.get(PARTICIPANT_ENV_VAR),
        help=f"Participant name (defaults to ${PARTICIPANT_ENV_VAR})",
    )
    parser.add_argument(
        "--api-url",
        default=os.environ.get(API_URL_ENV_VAR, DEFAULT_API_URL),
        help=f"Quiz backend base URL (defaults to ${API_URL_ENV_VAR} or {DEFAULT_API_URL})",
    )
    # String defaults go through ``type`` as well, so a bad env value is a usage error.
    parser.add_argument(
        "--timeout",
        type=parse_timeout,
        default=os.environ.get(REQUEST_TIMEOUT_ENV_VAR),
        help=(
            f"Request timeout in seconds (defaults to ${REQUEST_TIMEOUT_ENV_VAR}; no timeout when unset). "
            "Requests run on the UI thread, so without a timeout a hung backend freezes the window "
            "until it answers."
        ),
    )
    return parser
