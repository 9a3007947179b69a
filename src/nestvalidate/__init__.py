"""
This package helps you to validate nested data structures. Types declare a `validate` method and use the functions
of this package to validate their properties and collection elements. A failure deep inside the structure is reported
with the path to the invalid value, e.g. `Bars[1].Baz: qux`.
"""

from .dispatch import ensure, index_func, property_func, v, validate_each, validate_index, validate_property
from .errors import InvalidValueError, PropertyError, ValidationError, invalid
from .types import Validatable, ValidateThunk
from .utils import typed_property
