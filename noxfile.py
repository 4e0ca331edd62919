import os
from pathlib import Path
import nox

nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ["lint", "unit", "integration"]

INSTALL_ARGS = ["-e", ".[test]"]

# Forwarded to test sessions when set in the calling shell
PASSED_ENV_VARS = [
    "SECRET_KEY",
    "ENVIRONMENT",
    "DATABASE_URL",
    "LOG_LEVEL",
    "REDIS_URL",
]

SOURCES = ["schoolvote/", "tests/"]


def _prepare(session, install=True):
    session.env["PYTHONPATH"] = str(Path.cwd())
    for var in PASSED_ENV_VARS:
        if var in os.environ:
            session.env[var] = os.environ[var]
    if install:
        session.install(*INSTALL_ARGS)


@nox.session(name="lint")
def lint(session):
    """isort, black, flake8 and mypy over the package and tests."""
    _prepare(session, install=False)
    session.install("isort", "black", "flake8", "mypy")
    session.run("isort", *SOURCES)
    session.run("black", *SOURCES)
    session.run("flake8", *SOURCES)
    session.run("mypy", "schoolvote/")


@nox.session(name="unit")
def unit(session):
    """
    Service, core and middleware tests on in-memory SQLite, with coverage.

    Usage:
      nox -s unit
      nox -s unit -- tests/unit/test_services/test_vote.py
    """
    _prepare(session)
    session.run(
        "pytest",
        *(session.posargs or ["tests/unit"]),
        "-m", "unit",
        "-vv",
        "--tb=short",
        "--cov=schoolvote",
        "--cov-report=term-missing",
        "--cov-report=html:.nox/htmlcov",
        "--cov-fail-under=80",
    )


@nox.session(name="integration")
def integration(session):
    """
    API tests through the FastAPI TestClient, rate limiting included.

    Usage:
      nox -s integration -- tests/integration/test_api/test_voting_flow.py
    """
    _prepare(session)
    session.run(
        "pytest",
        *(session.posargs or ["tests/integration"]),
        "--maxfail=1",
        "-vv",
        "--tb=short",
    )
