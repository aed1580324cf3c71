from __future__ import annotations

from typing import Any, Optional


class PinyinParserError(Exception):
    pass


class UnimplementedPathError(PinyinParserError, NotImplementedError):
    """
    Raised when the parser reaches a token/state combination it does not handle yet.

    `state` is the parser state at the time and `token` the token being looked at
    (None at end of input).
    """

    def __init__(self, message: str, state: Any = None, token: Optional[Any] = None) -> None:
        super().__init__(message)
        self.state = state
        self.token = token


class CursorError(PinyinParserError):
    pass
