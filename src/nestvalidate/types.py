"""
Contains the types used by the validation helpers
"""
from typing import Callable, Optional, Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class Validatable(Protocol):
    """
    A protocol that defines the `validate` method. Every object providing it can be validated by `v`.
    The method returns `None` if the object is valid and the describing exception otherwise.
    """

    def validate(self) -> Optional[Exception]:
        ...


ValidateThunk: TypeAlias = Callable[[], Optional[Exception]]
