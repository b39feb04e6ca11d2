"""Unit tests: a single PRIMKIT module at a time, fast and deterministic."""
