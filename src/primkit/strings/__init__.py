"""String helpers.

- `scanner`: substring search, containment, prefix/suffix and difference
  detection.
- `transforms`: derived transformations built on the scanner.
- `chars`: character constants and surrogate predicates.

Nothing is re-exported here; import helpers from their defining modules.
"""
