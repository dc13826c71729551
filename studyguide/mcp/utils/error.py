# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Studyguide contributors
#

"""
Error handling utilities for creating annotated ToolErrors with user guidance.
"""

from fastmcp.exceptions import ToolError


def annotated_error(
    problem: str,
    likely_cause: str,
    next_steps: str,
    original_error: str | None = None,
) -> ToolError:
    """
    Create a ToolError that an agent can act on.

    Args:
        problem: Clear description of what went wrong
        likely_cause: Most probable reason for the failure
        next_steps: Actionable advice for resolving the issue
        original_error: Optional underlying error details

    Returns:
        ToolError whose message reads as one paragraph: problem, likely cause, next steps
    """
    message = f"{problem}. This likely means {likely_cause}. Next steps: {next_steps}"
    if original_error:
        message += f". Original error: {original_error}"
    return ToolError(message)
