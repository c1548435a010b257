"""structlog setup for gameid.

Every record, whether emitted through structlog or a plain
``logging.getLogger("gameid...")`` logger, is rendered by one
ProcessorFormatter on stderr so stdout stays reserved for results.

Renderers:
- console (default): key=value lines, colored on a TTY
- json (``--log-json``): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "gameid"

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def resolve_level(level: str | None, *, verbose: bool) -> int:
    """Pick the ``gameid`` logger level.

    ``-v`` forces DEBUG. Otherwise a configured level name applies, and
    unknown names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    if level is None:
        return logging.WARNING
    return _LEVELS.get(level.lower(), logging.WARNING)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    level: str | None = None,
) -> None:
    """Install the stderr handler and structlog pipeline.

    Safe to call repeatedly: the root logger keeps exactly one handler.

    Args:
        verbose: DEBUG for ``gameid.*`` regardless of *level*.
        log_json: JSON renderer instead of the console renderer.
        level: Level name from ``[logging] level`` in gameid.toml.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(resolve_level(level, verbose=verbose))
