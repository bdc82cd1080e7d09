import logging
from typing import Any, List, Optional

VERBOSE_HINT = "Run this again with verbose logging enabled to see the exception."


def _causes(exc: BaseException) -> List[BaseException]:
    causes = []
    current = exc.__cause__ or exc.__context__
    while current is not None and current not in causes:
        causes.append(current)
        current = current.__cause__ or current.__context__
    return causes


class DiagnosticLogger:
    """
    Diagnostic output for example extraction.

    Progress detail is only emitted in verbose mode, at INFO, so the host has
    to configure logging to see it. Route failures are always reported at
    WARNING: in verbose mode with the exception and its chained causes, otherwise
    with a one-line hint.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, verbose: bool = False):
        self._logger = logger or logging.getLogger("apidoc")
        self.verbose = verbose

    def detail(self, message: str, *args: Any) -> None:
        if self.verbose:
            self._logger.info(message, *args)

    def route_failure(self, route_label: str, summary: str, exc: BaseException) -> None:
        self._logger.warning("%s for %s.", summary, route_label)
        if not self.verbose:
            self._logger.warning(VERBOSE_HINT)
            return

        message = f"{type(exc).__name__}: {exc}"
        for cause in _causes(exc):
            message += f"\n  caused by {type(cause).__name__}: {cause}"
        self._logger.warning(message, exc_info=(type(exc), exc, exc.__traceback__))
