"""Element scaffolder -- generates a custom element and wires it into a project.

Quick usage::

    from el_scaffold.scaffolder import ElementGenerator
    from el_scaffold.config import ScaffoldConfig

    config = ScaffoldConfig(element_name="x-foo", include_docs=True)
    generator = ElementGenerator(config, "/path/to/project")
    written = generator.generate()
"""

from el_scaffold.scaffolder.generator import ElementGenerator, GeneratedFile
from el_scaffold.scaffolder.paths import ResolvedPaths, resolve_paths
from el_scaffold.scaffolder.suites import read_suites, register_suite
from el_scaffold.scaffolder.templates import TemplateRenderer, build_context
from el_scaffold.scaffolder.wiring import wire_import

__all__ = [
    "ElementGenerator",
    "GeneratedFile",
    "ResolvedPaths",
    "TemplateRenderer",
    "build_context",
    "read_suites",
    "register_suite",
    "resolve_paths",
    "wire_import",
]
