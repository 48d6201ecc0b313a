"""
Single-shot HTTP request helper.

Issues exactly one request and folds every outcome into either the decoded
JSON payload or an error message. Nothing raises past these functions except
task cancellation.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar, Union, cast

import httpx

from .http_result import (
    Err,
    HttpResult,
    Ok,
    ShapeMismatch,
    StatusFailure,
    TransportFailure,
    render,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

RequestTarget = Union[str, httpx.URL, httpx.Request]
RequestConfig = Mapping[str, Any]

RECOGNIZED_OPTIONS = frozenset({
    "method",
    "headers",
    "body",
    "json",
    "params",
    "cookies",
    "redirect",
    "follow_redirects",
})

REDIRECT_MODES = ("follow", "manual", "error")

# Headers describing the old body; dropped when config replaces the body.
_BODY_HEADERS = ("content-length", "content-type", "transfer-encoding")


def _split_body(body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return {"data": dict(body)}
    return {"content": body}


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not valid JSON.
    raise ValueError(f"Invalid JSON token {name}")


def _recognized(config: Optional[RequestConfig]) -> dict[str, Any]:
    options = dict(config or {})
    ignored = sorted(key for key in options if key not in RECOGNIZED_OPTIONS)
    if ignored:
        logger.debug(f"Ignoring unsupported request options: {ignored}")
    return {key: value for key, value in options.items() if key in RECOGNIZED_OPTIONS}


def _redirect_mode(options: dict[str, Any]) -> str:
    """``follow_redirects`` takes precedence over ``redirect`` when both are given."""
    if "follow_redirects" in options:
        if "redirect" in options:
            logger.debug(f"Ignoring redirect={options['redirect']!r} in favour of follow_redirects")
        return "follow" if options["follow_redirects"] else "manual"

    mode = options.get("redirect", "follow")
    if mode not in REDIRECT_MODES:
        raise ValueError(f"Invalid redirect mode: {mode!r}")
    return mode


def _build_request(
    client: Union[httpx.AsyncClient, httpx.Client],
    target: RequestTarget,
    options: dict[str, Any]
) -> httpx.Request:
    method = options.get("method")
    body = _split_body(options.get("body"))
    if "json" in options:
        body = {"json": options["json"]}

    if not isinstance(target, httpx.Request):
        return client.build_request(
            (method or "GET").upper(),
            target,
            headers=options.get("headers"),
            params=options.get("params"),
            cookies=options.get("cookies"),
            **body
        )

    if not options:
        return target

    # Config overrides the descriptor field by field.
    headers = httpx.Headers(target.headers)
    if body:
        for name in _BODY_HEADERS:
            headers.pop(name, None)
    else:
        body = {"content": target.read()}
    headers.update(options.get("headers") or {})

    url = target.url
    if options.get("params"):
        url = url.copy_merge_params(options["params"])

    return client.build_request(
        (method or target.method).upper(),
        url,
        headers=headers,
        cookies=options.get("cookies"),
        **body
    )


def _normalize(response: httpx.Response, redirect_mode: str) -> HttpResult:
    if redirect_mode == "error" and response.is_redirect:
        location = response.headers.get("location", "")
        return Err(TransportFailure(f"Unexpected redirect to {location}"))

    if not response.is_success:
        return Err(StatusFailure(response.status_code, response.reason_phrase))

    data = response.json(parse_constant=_reject_constant)

    if not isinstance(data, (dict, list)):
        return Err(ShapeMismatch())

    return Ok(data)


def _caught(target: RequestTarget, e: Exception) -> HttpResult:
    message = str(e) or type(e).__name__
    logger.debug(f"Request to {target} failed: {message}")
    return Err(TransportFailure(message))


async def _send(client: httpx.AsyncClient, target: RequestTarget, config: Optional[RequestConfig]) -> HttpResult:
    options = _recognized(config)
    redirect_mode = _redirect_mode(options)
    request = _build_request(client, target, options)

    response = await client.send(request, follow_redirects=redirect_mode == "follow")
    logger.debug(f"{request.method} {request.url} -> {response.status_code}")

    return _normalize(response, redirect_mode)


def _send_sync(client: httpx.Client, target: RequestTarget, config: Optional[RequestConfig]) -> HttpResult:
    options = _recognized(config)
    redirect_mode = _redirect_mode(options)
    request = _build_request(client, target, options)

    response = client.send(request, follow_redirects=redirect_mode == "follow")
    logger.debug(f"{request.method} {request.url} -> {response.status_code}")

    return _normalize(response, redirect_mode)


async def execute(
    target: RequestTarget,
    config: Optional[RequestConfig] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> HttpResult:
    """
    Perform one request and return a structured result.

    Args:
        target: URL string, httpx.URL or a prepared httpx.Request
        config: Optional request options (method, headers, body, json, params,
            cookies, redirect); unknown keys are ignored
        client: Caller-owned client to send through; left open afterwards
        transport: Transport for the per-call client when ``client`` is omitted

    Returns:
        Ok with the decoded JSON object or array, or Err describing the failure
    """
    try:
        if client is not None:
            return await _send(client, target, config)

        async with httpx.AsyncClient(timeout=None, transport=transport) as owned:
            return await _send(owned, target, config)

    except Exception as e:
        return _caught(target, e)


def execute_sync(
    target: RequestTarget,
    config: Optional[RequestConfig] = None,
    *,
    client: Optional[httpx.Client] = None,
    transport: Optional[httpx.BaseTransport] = None
) -> HttpResult:
    """Blocking counterpart of :func:`execute`."""
    try:
        if client is not None:
            return _send_sync(client, target, config)

        with httpx.Client(timeout=None, transport=transport) as owned:
            return _send_sync(owned, target, config)

    except Exception as e:
        return _caught(target, e)


async def http_request(
    target: RequestTarget,
    config: Optional[RequestConfig] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    expected: Optional[type[T]] = None
) -> Union[T, str]:
    """
    Perform one request and return the decoded payload or an error message.

    ``expected`` only narrows the static return type; the payload is not
    checked against it. Callers tell failure from success by ``isinstance(result, str)``.

    Example:
        result = await http_request("https://api.example.com/data")
        if isinstance(result, str):
            logger.error(result)
    """
    result = await execute(target, config, client=client, transport=transport)
    return cast(Union[T, str], render(result))


def http_request_sync(
    target: RequestTarget,
    config: Optional[RequestConfig] = None,
    *,
    client: Optional[httpx.Client] = None,
    transport: Optional[httpx.BaseTransport] = None,
    expected: Optional[type[T]] = None
) -> Union[T, str]:
    result = execute_sync(target, config, client=client, transport=transport)
    return cast(Union[T, str], render(result))


class HttpUtil:
    """Binds a transport to the request helpers."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport

    async def execute(self, target: RequestTarget, config: Optional[RequestConfig] = None) -> HttpResult:
        return await execute(target, config, transport=self.transport)

    async def request(self, target: RequestTarget, config: Optional[RequestConfig] = None) -> Any:
        return await http_request(target, config, transport=self.transport)


http = HttpUtil()
