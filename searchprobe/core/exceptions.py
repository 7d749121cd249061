"""Exception hierarchy for searchprobe.

Every error a scenario can fail with carries a ``kind`` string. The runner
records that kind in the report next to the error message.
"""

from __future__ import annotations


class SearchProbeError(Exception):
    """Base class for all searchprobe errors."""

    kind = "Error"


class ElementNotFoundError(SearchProbeError):
    """Raised when the driver reports a required element as missing."""

    kind = "ElementNotFound"


class WaitTimeoutError(SearchProbeError):
    """Raised when an element or page does not reach the awaited state in time."""

    kind = "Timeout"


class StepAssertionError(SearchProbeError, AssertionError):
    """Raised when a Then step check does not hold."""

    kind = "AssertionFailed"


class AmbiguousOrUnboundStepError(SearchProbeError):
    """Raised when step text matches zero or more than one binding.

    Parameters
    ----------
    step_type : str
        Step type the lookup was made for (given, when, then)
    text : str
        Step text as written in the scenario
    candidates : list[str] | None
        Patterns of every binding that matched the text
    """

    kind = "AmbiguousOrUnboundStep"

    def __init__(
        self, step_type: str, text: str, candidates: list[str] | None = None
    ) -> None:
        self.step_type = step_type
        self.text = text
        self.candidates = list(candidates or [])

        if self.candidates:
            listing = ", ".join(repr(c) for c in self.candidates)
            message = (
                f'Ambiguous step: {step_type} "{text}" matches '
                f"{len(self.candidates)} bindings: {listing}"
            )
        else:
            message = f'Undefined step: {step_type} "{text}" matches no binding'

        super().__init__(message)


class SessionStartError(SearchProbeError):
    """Raised when the browser driver could not be acquired or launched."""

    kind = "SessionStartFailure"


class SessionAlreadyActiveError(SearchProbeError):
    """Raised when a session is started while another one is still live."""

    kind = "SessionAlreadyActive"


class SessionClosedError(SearchProbeError):
    """Raised when a page object is used after its session was stopped."""

    kind = "SessionClosed"


def error_kind(error: BaseException) -> str:
    """Return the report kind for an exception.

    Parameters
    ----------
    error : BaseException
        Exception raised while running a scenario

    Returns
    -------
    str
        The ``kind`` of searchprobe errors, ``AssertionFailed`` for plain
        assertion errors and the class name for anything else
    """
    if isinstance(error, SearchProbeError):
        return error.kind

    if isinstance(error, AssertionError):
        return StepAssertionError.kind

    return type(error).__name__
