"""
Errors returned to API callers.

code is the HTTP status, public_message is shown to the client and
private_message only goes to the logs.
"""


class ApiError(Exception):
    def __init__(self, code: int, public_message: str, private_message: str = "", cause: Exception | None = None):
        super().__init__(public_message)
        self.code = int(code)
        self.public_message = public_message
        self.private_message = private_message
        self.cause = cause

    def causes(self) -> list:
        """The wrapped errors, innermost last."""
        chain = []
        c = self.cause
        while c is not None:
            chain.append(c)
            c = c.cause if isinstance(c, ApiError) else None
        return chain

    def summary(self) -> str:
        """This error alone, without its causes."""
        if self.private_message:
            return f"{self.code}: {self.public_message} ({self.private_message})"
        return f"{self.code}: {self.public_message}"

    def cause_messages(self) -> list:
        return [c.summary() if isinstance(c, ApiError) else repr(c) for c in self.causes()]

    def __str__(self):
        return " | ".join([self.summary()] + self.cause_messages())


def wrap(code: int, public_message: str, private_message: str, cause: Exception) -> ApiError:
    """ApiError with cause attached, for `raise wrap(...) from cause` style call sites."""
    return ApiError(code, public_message, private_message, cause=cause)
