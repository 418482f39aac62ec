# =============================================================================
# core/errors.py  —  The two ways a tool call can go wrong before Revit answers
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the exceptions the core raises.  There are exactly two, and they
#   are kept apart:
#
#     ArgumentValidationError  →  the agent sent arguments that break the
#                                 tool's contract.  Nothing was sent to Revit.
#     TransportError           →  the command never completed the round trip.
#                                 What happened inside Revit is unknown.
#
#   The third failure kind, "Revit answered Success: false", is NOT an
#   exception.  It is an ordinary CommandReply (see core/models.py) and the
#   formatters render it from the reply's Message.
#
#   Neither exception ever leaves a tool handler: tools/registry.py catches
#   both and turns them into text for the agent.
# =============================================================================

from typing import Optional


class RevitToolError(Exception):
    """Base class for failures raised inside the tool core.

    ``message`` is agent-facing text and is never empty.  ``cause`` keeps the
    original exception for the log; it is not shown to the agent.
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        safe_message = message.strip() if isinstance(message, str) else ""
        if not safe_message:
            safe_message = "Unknown error"
        super().__init__(safe_message)
        self.message = safe_message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ArgumentValidationError(RevitToolError):
    """Raw tool arguments failed the tool's schema.

    ``problems`` lists ``(field, constraint)`` pairs, where ``field`` is a
    dotted path such as ``data.colorValue``.
    """

    def __init__(
        self,
        problems: list[tuple[str, str]],
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.problems = list(problems)
        text = "; ".join(f"{field}: {constraint}" for field, constraint in self.problems)
        super().__init__(text or "invalid arguments", cause=cause)

    @property
    def fields(self) -> list[str]:
        return [field for field, _ in self.problems]


class TransportError(RevitToolError):
    """The command could not be delivered to Revit or its reply not read."""
