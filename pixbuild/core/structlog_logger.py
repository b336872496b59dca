"""Structlog logger factory and the mixin used by build components."""

from typing import Any

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module.

    Events are snake_case names with key/value context, e.g.
    ``logger.info("stage_started", stage="compile", board="d1_mini")``.
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


class StructlogMixin:
    """Give a build component a ``logger`` bound to its class name."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._logger: structlog.stdlib.BoundLogger | None = None

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        if self._logger is None:
            self._logger = get_struct_logger(self.__class__.__module__).bind(
                component=self.__class__.__name__
            )
        return self._logger
