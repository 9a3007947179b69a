"""
Contains the dispatcher `v` and the functions composing nested validation errors.

    @dataclass
    class Bar:
        baz: int

        def validate(self) -> Optional[Exception]:
            if self.baz == 0:
                return ValueError("qux")
            return None

    @dataclass
    class Foo:
        bars: list[Bar]

        def validate(self) -> Optional[Exception]:
            return validate_each("Bars", self.bars)

    str(v(Foo([Bar(1), Bar(0)])))  # Bars[1]: qux
"""
import inspect
import logging
from typing import Any, Iterable, Mapping, Optional, TypeVar

from .errors import PropertyError
from .types import Validatable, ValidateThunk

_logger = logging.getLogger(__name__)

ValueT = TypeVar("ValueT")


def _run(validate: ValidateThunk) -> Optional[Exception]:
    """
    Executes a validation callable. An exception raised by it is treated as if it had been returned.
    """
    try:
        return validate()
    except Exception as error:  # pylint: disable=broad-exception-caught
        _logger.debug("%r raised %r", validate, error, exc_info=True)
        return error


def _validate_method(value: Any) -> Optional[ValidateThunk]:
    """
    Returns the `validate` method of `value` if it can be called without arguments. Classes, data fields named
    `validate` and methods requiring arguments (e.g. a classmethod `validate(cls, value)`) don't count.
    """
    if isinstance(value, type) or not isinstance(value, Validatable):
        return None
    method = getattr(value, "validate")
    if not callable(method):
        return None
    try:
        inspect.signature(method).bind()
    except TypeError:
        return None
    except ValueError:
        # no signature available, e.g. for some builtins
        pass
    return method


def v(value: Any) -> Optional[Exception]:
    """
    Calls `validate()` on `value` if it is validatable and returns its result. Any other value is valid.
    """
    method = _validate_method(value)
    if method is None:
        return None
    return _run(method)


def property_func(name: Any, validate: ValidateThunk) -> Optional[Exception]:
    """
    Used in trickier validation cases where validating a property is more than a single call of `v`, e.g. looping over
    a collection. Any error returned by `validate` gets wrapped into a `PropertyError` labelled with `str(name)`.
    Try to use `validate_property` instead.
    """
    error = _run(validate)
    if error is None:
        return None
    _logger.debug("Property %s is invalid: %r", name, error)
    return PropertyError(str(name), None, error)


def validate_property(name: str, value: Any) -> Optional[Exception]:
    """
    Validates the value of a property:
    ```
    @dataclass
    class Foo:
        bar: Qux

        def validate(self):
            return validate_property("Bar", self.bar)
    ```
    """
    return property_func(name, lambda: v(value))


def index_func(index: Any, validate: ValidateThunk) -> Optional[Exception]:
    """
    Used for validating elements of properties which are sequences or mappings. Any error returned by `validate` gets
    wrapped into a nameless `PropertyError` labelled with `index`.
    """
    error = _run(validate)
    if error is None:
        return None
    _logger.debug("Element %r is invalid: %r", index, error)
    return PropertyError("", index, error)


def validate_index(index: Any, value: Any) -> Optional[Exception]:
    """Validates an element of a collection (see `validate_property`)."""
    return index_func(index, lambda: v(value))


def validate_each(name: Any, items: Iterable[Any] | Mapping[Any, Any]) -> Optional[Exception]:
    """
    Validates the elements of the collection property `name` and stops at the first invalid one.
    Sequences are labelled by position, mappings by key.
    """

    def validate_items() -> Optional[Exception]:
        pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
        for index, item in pairs:
            error = validate_index(index, item)
            if error is not None:
                return error
        return None

    return property_func(name, validate_items)


def ensure(value: ValueT) -> ValueT:
    """
    Raises the error returned by `v(value)`. If `value` is valid it is returned unchanged.
    """
    error = v(value)
    if error is not None:
        raise error
    return value
