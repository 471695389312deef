from enum import Enum


class ErrorKind(Enum):
    EMPTY = "empty"
    BAD_GENERIC = "invalid generic"


class SignatureError(ValueError):
    """
    Raised when a type signature is not syntactically well-formed.

    ``signature`` holds the text the failing stage was looking at. For errors
    coming out of a generic argument, this is the inner argument only; the
    caller is expected to know which signature it asked to parse.

    Only the subclasses are raised; constructing this class directly is a
    programming error.
    """

    kind: ErrorKind

    def __init__(self, signature: str) -> None:
        if not hasattr(self, "kind"):
            raise TypeError(f"{type(self).__name__} has no error kind")
        super().__init__(self.kind.value)
        self.signature = signature

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.signature!r})"


class EmptySignatureError(SignatureError):
    kind = ErrorKind.EMPTY


class BadGenericError(SignatureError):
    kind = ErrorKind.BAD_GENERIC
