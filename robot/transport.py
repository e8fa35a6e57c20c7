"""
HTTP transport for the Robot webservice.

Executes exactly one HTTPS request per call and hands back the raw status
code and body. HTTP error statuses are data at this layer, only a failure to
get any response at all is reported (as a result without body).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning


logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass
class Request:
    """
    A single webservice request.

    Attributes:
        method: HTTP method (GET, POST, PUT or DELETE)
        url: Absolute URL including any query string
        headers: Request headers
        body: Form payload, nested lists and dicts allowed (see build_form_data)
        auth: (username, password) for basic authentication
    """
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    auth: Optional[Tuple[str, str]] = None

    def __post_init__(self):
        self.method = self.method.upper()
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")


@dataclass(frozen=True)
class RawResult:
    """
    Outcome of one transport execution.

    A body of None means no response was obtained (connection refused,
    TLS failure, timeout...). An empty string is a real, empty response.
    """
    status_code: int
    body: Optional[str]

    @property
    def reachable(self) -> bool:
        return self.body is not None


class Transport(Protocol):
    """Anything able to execute a Request."""

    def execute(self, request: Request) -> RawResult: ...

    def close(self) -> None: ...


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(key: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if isinstance(item, (dict, list, tuple)):
                _flatten(f"{key}[{index}]", item, pairs)
            elif item is not None:
                pairs.append((f"{key}[]", _encode_scalar(item)))
    else:
        pairs.append((key, _encode_scalar(value)))


def build_form_data(data: Optional[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """
    Encode a payload mapping as form fields.

    Lists of scalars become repeated bracketed keys (authorized_key[]=...),
    dicts and lists of containers use indexed keys (rules[input][0][name]=...).
    None values and empty containers are left out, booleans are sent as
    "true"/"false".

    Args:
        data: Payload mapping

    Returns:
        List of (key, value) pairs, in payload order
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (data or {}).items():
        _flatten(str(key), value, pairs)
    return pairs


class HTTPTransport:
    """
    requests based transport.

    - One request per execute() call, no retry adapter mounted
    - Basic authentication taken from each Request
    - Optional timeout and certificate verification switch
    - Request/response lines logged only when built with verbose=True
    """

    def __init__(
        self,
        timeout: Optional[float] = 30,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
        verbose: bool = False,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds (None waits forever)
            verify_ssl: Verify the server certificate
            session: Optional preconfigured requests session
            verbose: Log every request and response of this transport
        """
        self.timeout = timeout
        self.verbose = verbose
        self.session = session if session is not None else requests.Session()
        self.session.verify = verify_ssl

        if not verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
            logger.warning(
                "SSL certificate verification disabled, "
                "only use this against test endpoints"
            )

    def execute(self, request: Request) -> RawResult:
        """
        Send the request and return its raw result.

        Args:
            request: Request to send

        Returns:
            RawResult with status code and body text, or with body None
            when no response could be obtained
        """
        data = build_form_data(request.body) or None

        if self.verbose:
            logger.info(f"{request.method} {request.url}")

        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=data,
                auth=request.auth,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            logger.error(f"Request timeout for {request.method} {request.url}")
            return RawResult(status_code=0, body=None)
        except requests.exceptions.RequestException as e:
            logger.error(f"Connection error for {request.method} {request.url}: {e}")
            return RawResult(status_code=0, body=None)

        if self.verbose:
            logger.info(f"Response: {response.status_code} - {response.text[:200]}")

        return RawResult(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        """Close the session."""
        self.session.close()
        logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
