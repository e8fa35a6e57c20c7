"""
Client for the Hetzner Robot webservice.
"""

from .client import RobotClient, decode_result, VERSION, USER_AGENT
from .config import RobotConfig, RobotConfigManager, DEFAULT_BASE_URL
from .errors import ApiError, NOT_REACHABLE, RESPONSE_DECODE_ERROR
from .transport import HTTPTransport, RawResult, Request, Transport, build_form_data

__version__ = VERSION
__all__ = [
    "RobotClient",
    "decode_result",
    "RobotConfig",
    "RobotConfigManager",
    "DEFAULT_BASE_URL",
    "ApiError",
    "NOT_REACHABLE",
    "RESPONSE_DECODE_ERROR",
    "HTTPTransport",
    "RawResult",
    "Request",
    "Transport",
    "build_form_data",
    "USER_AGENT",
]
