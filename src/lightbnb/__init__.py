from logging import (
    INFO,
    StreamHandler,
    basicConfig,
    getLevelNamesMapping,
    getLogger,
)
from sys import stdout
from typing import Final

from asgi_correlation_id import CorrelationIdFilter

from lightbnb.settings import get_settings

_log_format: Final[str] = (
    "%(levelname)s %(asctime)s [%(correlation_id)s] %(name)s: %(message)s"
)


def configure_logging() -> None:
    """Route all records to stdout tagged with the request's correlation id.

    An unrecognised ``lightbnb_log_level`` is reported once logging is up and
    INFO is used instead.
    """
    level_name = get_settings().log_level.upper()
    level = getLevelNamesMapping().get(level_name)
    handler = StreamHandler(stream=stdout)
    handler.addFilter(CorrelationIdFilter(uuid_length=32).filter)
    basicConfig(
        handlers=[handler],
        level=INFO if level is None else level,
        format=_log_format,
        force=True,
    )
    if level is None:
        getLogger(__name__).warning(
            f"unknown log level '{level_name}', using INFO"
        )


configure_logging()
