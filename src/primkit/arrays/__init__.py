"""Sequence helpers.

- `sorter`: randomized three-way quicksort with pluggable comparators.
- `sequences`: small copy-returning helpers over sequences.
"""
