"""User confirmation handling."""

import sys
from typing import Optional, Sequence, TextIO

from mv_videos.config.settings import CONFIRMATION_TOKEN
from mv_videos.exceptions import ConfirmationError
from mv_videos.models.selection import MovePlanEntry


def ask_for_confirmation(
    prompt: str,
    expected: str,
    reader: Optional[TextIO] = None,
    writer: Optional[TextIO] = None,
) -> bool:
    """
    Ask a question and compare the answer with an expected token.

    The comparison is case-sensitive and ignores surrounding whitespace.
    End of input counts as a refusal.

    Args:
        prompt: Text written before reading the answer.
        expected: Answer that confirms.
        reader: Input stream (default: stdin).
        writer: Output stream (default: stdout).

    Returns:
        True if the answer equals expected.

    Raises:
        ConfirmationError: If the prompt cannot be written or the answer read.
    """
    reader = reader or sys.stdin
    writer = writer or sys.stdout

    try:
        writer.write(prompt)
        writer.flush()
        answer = reader.readline()
    except (OSError, ValueError) as e:
        raise ConfirmationError() from e

    return answer.strip() == expected


def confirm_plan(
    plan: Sequence[MovePlanEntry],
    reader: Optional[TextIO] = None,
    writer: Optional[TextIO] = None,
) -> bool:
    """Ask the user to confirm moving the planned files."""
    prompt = f"Move {len(plan)} file(s)? Type '{CONFIRMATION_TOKEN}' to continue: "
    return ask_for_confirmation(prompt, CONFIRMATION_TOKEN, reader, writer)
