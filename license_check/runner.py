"""Validation run coordinator."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

import httpx

from license_check.checker import check_coordinate
from license_check.constants import (
    BANNER_RULE,
    BANNER_TITLE,
    OFFLINE_NOTICE,
    OSI_NOTICE,
)
from license_check.models.config import CheckConfig
from license_check.models.coordinate import DependencyCoordinate
from license_check.models.run import RunOutcome
from license_check.models.status import CoordinateCheck
from license_check.output.log import RunLog


def _print_banner(log: RunLog) -> None:
    log.info(BANNER_RULE)
    log.info(BANNER_TITLE)
    log.info(BANNER_RULE)


async def run_validation(
    coordinates: Iterable[DependencyCoordinate],
    config: CheckConfig,
    log: Optional[RunLog] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RunOutcome:
    """Validate the licenses of all coordinates, one at a time.

    Coordinates are checked in the order supplied. The run stops at the
    first coordinate that does not pass; nothing after it is checked.
    In offline mode nothing is checked and ``coordinates`` is not consumed.

    Args:
        coordinates: Dependency coordinates of the project.
        config: Run configuration (offline flag, host, notification email).
        log: Run log receiving the narration. Defaults to a new RunLog.
        transport: Optional httpx transport used for every check.

    Returns:
        RunOutcome with status SUCCESS, FAILURE or SKIPPED_OFFLINE.
    """
    log = log if log is not None else RunLog()
    _print_banner(log)

    if config.offline:
        log.info(OFFLINE_NOTICE)
        return RunOutcome.skipped_offline()

    log.info(OSI_NOTICE)
    pending = list(coordinates)
    log.info(f"Found {len(pending)} artifacts")

    checks: list[CoordinateCheck] = []
    for coordinate in pending:
        log.info(f"{coordinate}...")
        check = await check_coordinate(
            coordinate,
            config.host,
            config.notification_email,
            log=log,
            transport=transport,
        )
        checks.append(check)
        if not check.passed:
            break

    return RunOutcome.from_checks(checks)


async def validate_dependencies(
    coordinates: Iterable[DependencyCoordinate],
    config: CheckConfig,
    log: Optional[RunLog] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RunOutcome:
    """Run validation and raise if it failed.

    Returns:
        RunOutcome with status SUCCESS or SKIPPED_OFFLINE.

    Raises:
        ValidationFailure: Naming the first coordinate that failed.
    """
    outcome = await run_validation(coordinates, config, log=log, transport=transport)
    outcome.raise_for_status()
    return outcome
