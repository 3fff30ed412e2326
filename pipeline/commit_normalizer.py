"""Clean up raw GitHub commits for display.

Merge commits are dropped and "Signed-off-by:" trailer lines are removed
from the remaining messages. Commit order is never changed.
"""

from typing import Any, Iterable

from models.data_models import Commit

MERGE_PREFIX = "Merge"
SIGN_OFF_PREFIX = "Signed-off-by:"


def get_commit_message(raw_commit: dict[str, Any]) -> str:
    """Message of a raw GitHub commit object ({"commit": {"message": ...}}).

    Missing fields count as an empty message.

    Raises:
        TypeError: If the object does not have the GitHub commit shape
    """
    if not isinstance(raw_commit, dict):
        raise TypeError(f"Expected commit object, got {type(raw_commit).__name__}")

    details = raw_commit.get("commit") or {}
    if not isinstance(details, dict):
        raise TypeError(f"Expected commit details object, got {type(details).__name__}")

    message = details.get("message") or ""
    if not isinstance(message, str):
        raise TypeError(f"Expected commit message string, got {type(message).__name__}")
    return message


def is_merge_commit(message: str) -> bool:
    """Case-sensitive prefix check on the untouched message."""
    return message.startswith(MERGE_PREFIX)


def strip_sign_off_lines(message: str) -> str:
    """Remove sign-off trailer lines from a commit message.

    A line is removed when, after trimming surrounding whitespace, it starts
    with "Signed-off-by:". Lines that only contain the marker further in are
    kept, as are blank lines. A message with no sign-off is returned
    unchanged, trailing blank lines included.

    When a sign-off was removed, blank lines left dangling at the end are
    dropped as well. This is a deliberate exception to keeping blank lines:
    a "fix bug" commit whose sign-off followed a blank separator comes out
    as plain "fix bug" rather than with a trailing newline. Only lines after
    the last kept content are trimmed.
    """
    lines = message.split("\n")
    kept = [line for line in lines if not line.strip().startswith(SIGN_OFF_PREFIX)]

    if len(kept) == len(lines):
        return message

    while kept and not kept[-1].strip():
        kept.pop()
    return "\n".join(kept)


def normalize(raw_commits: Iterable[dict[str, Any]]) -> list[Commit]:
    """Filter and rewrite a PR's raw commit list.

    Args:
        raw_commits: Raw GitHub commit objects in upstream order

    Returns:
        Commits with merge commits removed and sign-offs stripped, in the
        same relative order as the input
    """
    normalized = []
    for raw_commit in raw_commits:
        message = get_commit_message(raw_commit)
        if is_merge_commit(message):
            continue
        normalized.append(Commit(message=strip_sign_off_lines(message)))
    return normalized
