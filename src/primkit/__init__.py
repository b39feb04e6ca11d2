"""PRIMKIT

A toolkit of stateless helpers over primitive and built-in container types.
Its core is a family of string-scanning primitives and a randomized
three-way quicksort driven by pluggable comparators.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
