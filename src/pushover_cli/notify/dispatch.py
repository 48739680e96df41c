"""Send one notification: resolve, encode, frame, deliver, validate.

Failures are re-raised as :class:`~pushover_cli.errors.DispatchError`
tagged with the stage that failed, chained to the original error.
"""

from __future__ import annotations

import logging
import ssl
from typing import Optional

from ..config import Configuration
from ..endpoint import resolve_url
from ..errors import DeliveryRejected, DispatchError, TransportError, UrlError
from ..form import DispatchRequest, build_form, effective_token
from .http import check_response, frame_request
from .transport import deliver

logger = logging.getLogger(__name__)

PUSHOVER_API_URL = "https://api.pushover.net/1/messages.json"


def dispatch(
    config: Configuration,
    request: DispatchRequest,
    *,
    url: str = PUSHOVER_API_URL,
    timeout: Optional[float] = None,
    context: Optional[ssl.SSLContext] = None,
) -> None:
    """Deliver *request* using the credentials in *config*.

    Returns normally only when the API answered with a ``200`` status line.

    Raises:
        DispatchError: With ``stage`` set to ``"url"``, ``"transport"`` or
            ``"validation"``.
    """
    try:
        target = resolve_url(url)
    except UrlError as e:
        raise DispatchError("url", e) from e
    logger.debug("Endpoint %s:%d%s", target.host, target.port, target.path)

    body = build_form(
        request,
        user=config.pushover_user,
        token=effective_token(config, request),
    )
    raw_request = frame_request(target.host, target.path, body)

    try:
        response = deliver(target.host, target.port, raw_request, timeout=timeout, context=context)
    except TransportError as e:
        raise DispatchError("transport", e) from e

    try:
        line = check_response(response)
    except DeliveryRejected as e:
        raise DispatchError("validation", e) from e
    logger.debug("Status line: %s", line)
