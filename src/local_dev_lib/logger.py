"""Routing of user-facing log messages to optional caller callbacks."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

LogCallbacks = Mapping[str, Callable[..., Any]]

logger = logging.getLogger(__name__)


def make_typed_logger(
    callbacks: LogCallbacks | None = None, prefix: str = ""
) -> Callable[..., None]:
    """Build a logger that prefers caller-supplied callbacks.

    Library code reports notable events by key (e.g. ``"no_account_id"``).
    When the caller registered a callback for that key it is invoked with
    the keyword context; otherwise the event is written to the debug log.

    Args:
        callbacks: Mapping of event key to callback.
        prefix: Dotted prefix for the debug log message.

    Returns:
        A function ``log(key, message=None, **context)``.
    """

    def log(key: str, message: str | None = None, **context: Any) -> None:
        if callbacks and key in callbacks:
            callbacks[key](**context)
            return
        name = f"{prefix}.{key}" if prefix else key
        if message:
            name = f"{name}: {message}"
        if context:
            logger.debug(f"{name} {context}")
        else:
            logger.debug(name)

    return log
