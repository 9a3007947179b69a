"""
Contains some useful utility functions to be used in validate methods.
"""
from .type_check import typed_property
