import logging
from pprint import pformat
from typing import Any

from pydantic import BaseModel

LOGGER_NAME = "tvdbids"


class PprintLogger:
    """A logger wrapper that pretty-prints provider-id payloads.

    The message is a %-format string as usual. Arguments that are mappings or
    pydantic subjects are rendered readably (pformat / model_dump_json) before
    being interpolated; everything else is left to the stdlib formatter.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @staticmethod
    def _render(arg: Any) -> Any:
        if isinstance(arg, BaseModel):
            return arg.model_dump_json(indent=2)
        if isinstance(arg, dict):
            return pformat(arg, width=120)
        return arg

    def _log(self, level: int, msg: str, args: tuple, pprint: bool) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if pprint:
            args = tuple(self._render(arg) for arg in args)
        self._logger.log(level, msg, *args, stacklevel=3)

    def debug(self, msg: str, *args: Any, pprint: bool = True) -> None:
        self._log(logging.DEBUG, msg, args, pprint)

    def warning(self, msg: str, *args: Any, pprint: bool = True) -> None:
        self._log(logging.WARNING, msg, args, pprint)

    # Delegate other standard logger methods/attributes
    def __getattr__(self, name: str) -> Any:
        return getattr(self._logger, name)


def setup_logging(level: int | str = logging.WARNING, name: str = LOGGER_NAME) -> PprintLogger:
    """Set up the named logger once and return it wrapped in a PprintLogger.

    A stream handler is attached only if the logger has none, so repeated
    calls (one per module) do not duplicate output.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
    return PprintLogger(logger)
