class HashIDError(ValueError):
    """Base class for codec errors."""


class InvalidTokenError(HashIDError):
    """The token is not something this codec could have produced."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid token '{token}': {reason}")
        self.token = token
        self.reason = reason


class EmptyTokenError(InvalidTokenError):
    def __init__(self, token: str = ""):
        super().__init__(token, "nothing to decode")


class TokenVerificationError(InvalidTokenError):
    """Raised when a token decodes to a number whose encoding differs from the token."""

    def __init__(self, token: str, value: int, expected: str):
        super().__init__(token, f"re-encoding {value} gives '{expected}'")
        self.value = value
        self.expected = expected
