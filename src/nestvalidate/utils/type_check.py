"""
Contains a helper to check the runtime type of property values inside `validate` methods.
"""
from typing import Any, Optional

from typeguard import TypeCheckError, check_type

from ..dispatch import property_func


def typed_property(name: str, value: Any, expected_type: Any) -> Optional[Exception]:
    """
    Checks that `value` matches `expected_type`. If it doesn't, the `TypeCheckError` will be returned wrapped into a
    `PropertyError` for the property `name`, e.g. `Bars[0].Baz: str is not an instance of int`.
    The type may be any annotation typeguard understands, e.g. `list[int]` or `Optional[str]`.
    """

    def check() -> Optional[Exception]:
        try:
            check_type(value, expected_type)
        except TypeCheckError as error:
            return error
        return None

    return property_func(name, check)
