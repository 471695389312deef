from ._impl import (
    BadGenericError,
    EmptySignatureError,
    ErrorKind,
    SignatureError,
    TypeSignature,
    parse,
)
from .version import __version__

__all__ = [
    "TypeSignature",
    "parse",
    "SignatureError",
    "EmptySignatureError",
    "BadGenericError",
    "ErrorKind",
    "__version__",
]
