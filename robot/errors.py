"""
Error type raised by the Robot webservice client.
"""

from typing import Optional, Union


NOT_REACHABLE = "NOT_REACHABLE"
RESPONSE_DECODE_ERROR = "RESPONSE_DECODE_ERROR"


class ApiError(Exception):
    """
    Failure of a single Robot webservice call.

    Attributes:
        message: Error message from the webservice (None when the response
            carried no structured error)
        code: Error code, either a string like "SERVER_NOT_FOUND" or the
            numeric HTTP status code
    """

    def __init__(self, message: Optional[str], code: Union[str, int]):
        super().__init__(message if message is not None else code)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.message is None:
            return str(self.code)
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, code={self.code!r})"
