"""PANELSEED test suite.

Layout
- unit/         : one module at a time; in-memory stores and fakes.
- contract/     : the same assertions run against every implementation of an
                  interface (in-memory and SQLAlchemy repositories, generators).
- integration/  : real SQLite files, migrations and the bootstrap wiring.
- functional/   : the ``panelseed`` CLI driven through ``CliRunner``.
- fixtures/     : shared fixtures loaded through ``pytest_plugins``.

Each folder's tests get the matching marker automatically (see conftest.py);
hypothesis tests are additionally marked ``property``.
"""
