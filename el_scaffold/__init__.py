"""el-scaffold -- scaffolds custom elements into an existing web project.

Quick usage::

    from pathlib import Path

    from el_scaffold import ElementGenerator, ScaffoldConfig, TestKind

    config = ScaffoldConfig(element_name="x-foo", test_kind=TestKind.TDD)
    written = ElementGenerator(config, Path.cwd()).generate()
"""

from el_scaffold.config import ScaffoldConfig, ScaffoldDefaults, TestKind
from el_scaffold.errors import (
    ConfigError,
    DirectiveNotFoundError,
    MalformedDirectiveError,
    ScaffoldError,
)
from el_scaffold.scaffolder import ElementGenerator, GeneratedFile

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DirectiveNotFoundError",
    "ElementGenerator",
    "GeneratedFile",
    "MalformedDirectiveError",
    "ScaffoldConfig",
    "ScaffoldDefaults",
    "ScaffoldError",
    "TestKind",
]
