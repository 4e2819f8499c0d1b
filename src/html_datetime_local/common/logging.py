"""Logging setup for applications and tests using html_datetime_local."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "html_datetime_local"


def configure_logging(
    *,
    level: int = logging.INFO,
    package_level: int | None = None,
    force: bool = False,
) -> None:
    """Install a root handler for hosts that have no logging setup of their own.

    Only ``html_datetime_local.*`` loggers are affected by ``package_level``;
    set it to ``logging.DEBUG`` to see why submitted form values were rejected
    while the rest of the application stays at ``level``. ``force`` replaces
    handlers installed earlier, e.g. by a test runner.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if package_level is not None:
        logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)
