"""Interfaces (contracts) for PRIMKIT.

Defines the abstract contracts the algorithms are written against: the
three-way comparator and the pivot-selection strategy used by the sorter.

Dependency rule: this package is independent. Do not import from other
`primkit.*` modules. It may be imported by `primkit.adapters`,
`primkit.arrays` and `primkit.strings`.
"""
