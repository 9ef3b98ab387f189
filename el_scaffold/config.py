"""Scaffold configuration.

Typed, validated inputs for a single scaffolding run. ``ScaffoldConfig`` is
what the engine consumes; ``ScaffoldDefaults`` carries project-wide directory
defaults that can be supplied through environment variables and are
overridden by command-line flags.
"""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from el_scaffold.errors import ConfigError

ELEMENT_NAME_SEPARATOR = "-"

DEFAULT_APP_DIR = "app"
DEFAULT_ELEMENTS_DIR = "elements"
DEFAULT_DEP_CACHE_DIR = "bower_components"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TestKind(str, Enum):
    """Style of test stub to generate alongside the element."""

    __test__ = False

    TDD = "TDD"
    BDD = "BDD"
    NONE = "None"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ScaffoldConfig(BaseModel):
    """Everything the engine needs to scaffold one element.

    Directory overrides are relative to the app root (``elements_root``,
    ``dep_cache_root``) or to the project root (``app_root``).  ``nested_path``
    replaces the element's own directory name under the elements root.
    """

    model_config = ConfigDict(frozen=True)

    element_name: str = Field(..., description="Custom element tag name, e.g. x-foo")
    dependencies: tuple[str, ...] = Field(
        default=(),
        description="Element names imported by the new element's template",
    )
    app_root: str | None = Field(default=None, description="Override for the app directory")
    elements_root: str | None = Field(
        default=None, description="Elements directory, relative to the app directory"
    )
    dep_cache_root: str | None = Field(
        default=None, description="Dependency cache directory, relative to the app directory"
    )
    nested_path: str | None = Field(
        default=None, description="Nested placement under the elements directory"
    )
    include_docs: bool = Field(default=False, description="Generate docs and demo pages")
    include_import: bool = Field(default=False, description="Append an import to elements.html")
    test_kind: TestKind = Field(default=TestKind.NONE, description="Test stub style")

    @property
    def basic_test_name(self) -> str:
        """File name of the generated test stub, e.g. ``x-foo-basic.html``."""
        return f"{self.element_name}-basic.html"


class ScaffoldDefaults(BaseModel):
    """Project-wide directory defaults.

    Values of ``None`` mean "use the built-in default" and are resolved by the
    path resolver, not here.
    """

    app_root: str | None = None
    elements_root: str | None = None
    dep_cache_root: str | None = None

    @classmethod
    def from_env(cls) -> "ScaffoldDefaults":
        """Build defaults from environment variables.

        Recognised variables (all optional):
            EL_SCAFFOLD_APP, EL_SCAFFOLD_ELEMENTS, EL_SCAFFOLD_DEP_CACHE.
        """
        return cls(
            app_root=os.environ.get("EL_SCAFFOLD_APP") or None,
            elements_root=os.environ.get("EL_SCAFFOLD_ELEMENTS") or None,
            dep_cache_root=os.environ.get("EL_SCAFFOLD_DEP_CACHE") or None,
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_element_name(name: str) -> None:
    """Raise ``ConfigError`` unless *name* is a compound (hyphenated) tag name."""
    if ELEMENT_NAME_SEPARATOR not in name:
        raise ConfigError(
            f'Element name must contain a dash "{ELEMENT_NAME_SEPARATOR}"\n'
            "ex: el-scaffold my-element"
        )


def validate_config(config: ScaffoldConfig) -> ScaffoldConfig:
    """Check a config before any path is resolved or file touched.

    Returns the config unchanged so calls can be chained.
    """
    validate_element_name(config.element_name)
    return config
