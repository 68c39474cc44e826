"""Coordinate checker: query the validation server for one dependency."""
from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError

from license_check.constants import NO_LICENSE_FOUND
from license_check.exceptions import LookupFailure
from license_check.models.coordinate import DependencyCoordinate
from license_check.models.status import CheckOutcome, CoordinateCheck, LicenseStatus
from license_check.output.log import RunLog


def build_check_url(
    coordinate: DependencyCoordinate,
    host: str,
    notification_email: Optional[str] = None,
) -> str:
    """Build the validation request URL for a coordinate.

    The coordinate is appended to ``host`` verbatim, so the host controls
    the separator (``.../license-check/`` or ``...?id=``).

    Args:
        coordinate: Dependency to check.
        host: Base URL of the validation server.
        notification_email: Optional address passed as ``notify``.

    Returns:
        Request URL, e.g. ``http://x/g:a:1.0?notify=e@x.com``.
    """
    url = f"{host}{coordinate}"
    if notification_email:
        url += f"?notify={notification_email}"
    return url


async def fetch_license_status(url: str, client: httpx.AsyncClient) -> LicenseStatus:
    """Fetch and decode the license-status document at ``url``.

    Args:
        url: Full request URL from build_check_url().
        client: HTTP client to issue the GET with.

    Returns:
        Decoded LicenseStatus.

    Raises:
        LookupFailure: On transport errors, non-2xx responses, or a body
            that is not a license-status JSON object.
    """
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise LookupFailure(
            f"Validation server returned {e.response.status_code} for {url}"
        ) from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise LookupFailure(f"Failed to fetch {url}: {e}") from e

    try:
        document = response.json()
    except ValueError as e:
        raise LookupFailure(f"Malformed JSON from {url}: {e}") from e

    try:
        return LicenseStatus.model_validate(document)
    except ValidationError as e:
        raise LookupFailure(
            f"Unexpected license-status document from {url}: "
            f"{e.error_count()} validation error(s)"
        ) from e


def describe_status(status: LicenseStatus) -> str:
    """Build the narration line for a license status."""
    if status.is_ok:
        return f"...{status.declared}: {status.license}"
    return f"...{status.declared}: : {status.license or NO_LICENSE_FOUND}"


async def check_coordinate(
    coordinate: DependencyCoordinate,
    host: str,
    notification_email: Optional[str] = None,
    log: Optional[RunLog] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CoordinateCheck:
    """Check one coordinate against the validation server.

    A fresh client is opened for the check and closed before returning.
    Lookup failures are logged and reported as LOOKUP_ERROR, never raised.
    Redirects are followed; only the final response is classified.

    Args:
        coordinate: Dependency to check.
        host: Base URL of the validation server.
        notification_email: Optional address passed as ``notify``.
        log: Run log receiving the narration. Defaults to a new RunLog.
        transport: Optional httpx transport for the client.

    Returns:
        CoordinateCheck classifying the result as PASS, FAIL or LOOKUP_ERROR.
    """
    log = log if log is not None else RunLog()
    url = build_check_url(coordinate, host, notification_email)

    try:
        async with httpx.AsyncClient(
            transport=transport, follow_redirects=True
        ) as client:
            status = await fetch_license_status(url, client)
    except LookupFailure as e:
        message = str(e)
        log.error(message)
        return CoordinateCheck(
            coordinate=coordinate,
            outcome=CheckOutcome.LOOKUP_ERROR,
            message=message,
        )

    message = describe_status(status)
    if status.is_ok:
        log.info(message)
        outcome = CheckOutcome.PASS
    else:
        log.error(message)
        outcome = CheckOutcome.FAIL

    return CoordinateCheck(
        coordinate=coordinate,
        outcome=outcome,
        status=status,
        message=message,
    )
