# topmark:header:start
#
#   project      : Polisher
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Polisher project automation via Nox.

Sessions:
  - `qa`: Per-Python session that installs the package with its test extra
    and runs pytest.

Common invocations:
  - `nox -s qa`
  - `nox -s qa -- -k profiles`
"""

from __future__ import annotations

import nox

PYTHON_VERSIONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["qa"]
nox.options.reuse_existing_virtualenvs = True


@nox.session(python=PYTHON_VERSIONS)
def qa(session: nox.Session) -> None:
    """Run the test suite."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)
