"""PRIMKIT test suite.

Layout
- unit/      : one test module per source module; no I/O beyond tmp paths.
- contract/  : suites every Comparator / PivotSelector adapter must pass.
- e2e/       : the `primkit` CLI driven through Click's CliRunner.
- helpers/   : shared test doubles and assertions (no tests here).

Markers `unit`, `contract` and `e2e` are applied by directory in
`tests/conftest.py`. Hypothesis tests carry `@pytest.mark.property`.
"""
