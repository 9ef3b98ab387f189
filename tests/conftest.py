"""Shared pytest fixtures for the el-scaffold test suite.

Provides reusable fixtures for:
- Sample harness and aggregator file contents
- Temporary project trees laid out the way the scaffolder expects
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# File contents
# ---------------------------------------------------------------------------

HARNESS_HTML = textwrap.dedent(
    """\
    <!doctype html>
    <html>
    <head>
      <meta charset="utf-8">
      <script src="../bower_components/webcomponentsjs/webcomponents-lite.js"></script>
      <script src="../bower_components/web-component-tester/browser.js"></script>
    </head>
    <body>
      <script>
        // Load and run all tests (.html, .js) as one suite:
        WCT.loadSuites(['my-greeting-basic.html', 'my-list-basic.html']);
      </script>
    </body>
    </html>
    """
)

AGGREGATOR_HTML = textwrap.dedent(
    """\
    <!-- Iron elements -->
    <link rel="import" href="../bower_components/iron-icons/iron-icons.html">

    <!-- Your elements -->
    <link rel="import" href="my-greeting/my-greeting.html">
    """
)


@pytest.fixture
def harness_text() -> str:
    """A web-component-tester ``test/index.html`` with two registered suites."""
    return HARNESS_HTML


@pytest.fixture
def aggregator_text() -> str:
    """An ``elements.html`` holding two imports."""
    return AGGREGATOR_HTML


# ---------------------------------------------------------------------------
# Project trees
# ---------------------------------------------------------------------------


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Project root with an ``app/elements`` directory and nothing else."""
    project = tmp_path / "project"
    (project / "app" / "elements").mkdir(parents=True)
    return project


@pytest.fixture
def project_dir(empty_project: Path) -> Path:
    """Project root with an aggregator file and a test harness in place."""
    (empty_project / "app" / "elements" / "elements.html").write_text(
        AGGREGATOR_HTML, encoding="utf-8"
    )
    test_dir = empty_project / "app" / "test"
    test_dir.mkdir(parents=True)
    (test_dir / "index.html").write_text(HARNESS_HTML, encoding="utf-8")
    return empty_project
