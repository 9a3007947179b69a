"""
Contains the exceptions produced by the validation helpers. A failing nested property is reported as a chain of
`PropertyError`s which renders as a single path, e.g. `Bars[1].Baz: qux`.
"""
from typing import Any


class ValidationError(ValueError):
    """Base class for the errors created by this package."""


def _join(prefix: str, inner: "PropertyError", rest: str) -> str:
    """
    Concatenates the path prefix of a layer with the rendering of its inner layer. A nameless inner layer (e.g. an
    index) is fused directly onto the prefix so that `Bars` and `[1].Baz` become `Bars[1].Baz`.
    """
    if not prefix or not inner.name:
        return f"{prefix}{rest}"
    return f"{prefix}.{rest}"


class PropertyError(ValidationError):
    """
    A validation error raised by a (possibly nested) property or collection element.
    Every instance wraps exactly one inner error, which is either another `PropertyError` or the originating leaf
    error. The wrapped error is also set as `__cause__`, so tracebacks show where the chain ends.
    """

    def __init__(self, name: str, index: Any, inner: Exception):
        super().__init__(name, index, inner)
        self._name = name
        self._index = index
        self._inner = inner
        self.__cause__ = inner

    @property
    def name(self) -> str:
        """The name of the invalid property. Empty if this layer only labels a collection element."""
        return self._name

    @property
    def index(self) -> Any:
        """The key of the invalid collection element or `None` if this layer doesn't label one."""
        return self._index

    @property
    def inner(self) -> Exception:
        """The wrapped error"""
        return self._inner

    @property
    def originating_error(self) -> Exception:
        """
        The validation error which started the chain, i.e. the first wrapped error which is not a `PropertyError`.
        """
        inner = self._inner
        while isinstance(inner, PropertyError):
            inner = inner.inner
        return inner

    def _prefix(self) -> str:
        if self._index is None:
            return self._name
        return f"{self._name}[{self._index!r}]"

    @property
    def property_path(self) -> str:
        """The path of the invalid property, e.g. `Bars[1].Baz`."""
        prefix = self._prefix()
        if isinstance(self._inner, PropertyError):
            return _join(prefix, self._inner, self._inner.property_path)
        return prefix

    def __str__(self) -> str:
        prefix = self._prefix()
        if isinstance(self._inner, PropertyError):
            return _join(prefix, self._inner, str(self._inner))
        if not prefix:
            return str(self._inner)
        return f"{prefix}: {self._inner}"

    def __repr__(self) -> str:
        return f"PropertyError({self._name!r}, {self._index!r}, {self._inner!r})"


class InvalidValueError(ValidationError):
    """
    Describes an invalid value by a list of tokens. The last token is the offending value, the ones before describe it.
    """

    def __init__(self, *tokens: Any):
        super().__init__(*tokens)
        self.tokens: tuple[Any, ...] = tokens

    def __str__(self) -> str:
        if not self.tokens:
            return "Invalid"
        *description, value = self.tokens
        prefix = " ".join(["Invalid", *(str(token) for token in description)])
        return f"{prefix}: {value!r}"


def invalid(*tokens: Any) -> InvalidValueError:
    """
    Creates an error describing an invalid value:
    ```
    invalid()                    # Invalid
    invalid("foo")               # Invalid: 'foo'
    invalid("foo", "bar")        # Invalid foo: 'bar'
    invalid("foo", "bar", "baz") # Invalid foo bar: 'baz'
    ```
    """
    return InvalidValueError(*tokens)

