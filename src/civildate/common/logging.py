"""Logging setup for applications embedding civildate."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "civildate"


def configure_logging(
    *, level: int = logging.INFO, trace_conversions: bool = False, force: bool = False
) -> None:
    """Initialise the root logger with a terse format.

    ``trace_conversions`` lowers the ``civildate`` logger to DEBUG so that
    failed conversions (which reset a date to its zero value) are reported even
    when the application runs at a higher level. Without it the package logger
    keeps whatever level the application gave it. Pass ``force=True`` to
    reconfigure during tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if trace_conversions:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
