from .errors import BadGenericError, EmptySignatureError, ErrorKind, SignatureError
from .ty import TypeSignature, parse

__all__ = [
    "BadGenericError",
    "EmptySignatureError",
    "ErrorKind",
    "SignatureError",
    "TypeSignature",
    "parse",
]
