from __future__ import annotations

import logging

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    A structlog logger writing to the standard library logger `name`.

    Events only show up once the application configures `logging`; without
    that they are dropped. Level filtering happens before any rendering.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(
                key_order=["event"], sort_keys=True
            ),
        ],
    )
