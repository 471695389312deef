import logging
from dataclasses import dataclass
from string import ascii_lowercase
from typing import Iterator, Optional, Tuple

from typing_extensions import Self

from .errors import BadGenericError, EmptySignatureError

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeSignature:
    namespace: Tuple[str, ...]
    name: str
    is_bare: bool
    is_generic_reference: bool
    generic_argument: Optional["TypeSignature"]

    @classmethod
    def from_str(cls, ty: str) -> Self:
        """
        Parses a single type signature, such as ``!X``, ``Vector<int>`` or
        ``storage.FileType``.

        :raises EmptySignatureError: if the signature or any component of its
            dotted path is empty.
        :raises BadGenericError: if a ``<`` is present but the signature does
            not end with ``>``.

        Each level of generic nesting is one level of recursion, so inputs
        nested deeper than the interpreter recursion limit raise
        ``RecursionError``.
        """
        original = ty

        # `!type`
        if ty.startswith("!"):
            ty, is_generic_reference = ty[1:], True
        else:
            is_generic_reference = False

        # `type<generic_argument>`
        if (pos := ty.find("<")) != -1:
            if not ty.endswith(">"):
                _log.debug("rejecting signature %r: unterminated generic", original)
                raise BadGenericError(original)
            ty, generic_argument = ty[:pos], cls.from_str(ty[pos + 1 : -1])
        else:
            generic_argument = None

        # `ns1.ns2.name`
        namespace = ty.split(".")
        if not all(namespace):
            _log.debug("rejecting signature %r: empty component", original)
            raise EmptySignatureError(original)

        name = namespace.pop()

        return cls(
            namespace=tuple(namespace),
            name=name,
            is_bare=name[0] in ascii_lowercase,
            is_generic_reference=is_generic_reference,
            generic_argument=generic_argument,
        )

    @property
    def full_name(self) -> str:
        ns = ".".join(self.namespace) + "." if self.namespace else ""
        return f"{ns}{self.name}"

    def __str__(self) -> str:
        res = "!" if self.is_generic_reference else ""
        res += self.full_name
        if self.generic_argument is not None:
            res += f"<{self.generic_argument}>"
        return res

    def find_generic_refs(self) -> Iterator[str]:
        if self.is_generic_reference:
            yield self.name
        if self.generic_argument is not None:
            yield from self.generic_argument.find_generic_refs()


def parse(ty: str) -> TypeSignature:
    return TypeSignature.from_str(ty)
