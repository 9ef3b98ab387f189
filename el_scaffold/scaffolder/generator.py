"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and a project root and produces the new element,
its optional docs/demo pages and test stub, and the updated aggregator and
harness files.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from pathlib import Path

from el_scaffold.config import ScaffoldConfig, TestKind, validate_config
from el_scaffold.scaffolder.paths import ResolvedPaths, resolve_paths
from el_scaffold.scaffolder.suites import register_suite
from el_scaffold.scaffolder.templates import (
    DEMO_TEMPLATE,
    DOCS_TEMPLATE,
    ELEMENT_TEMPLATE,
    TEST_TEMPLATES,
    TemplateRenderer,
    build_context,
    build_test_context,
)
from el_scaffold.scaffolder.wiring import import_ref, wire_import
from el_scaffold.utils import read_text, write_text


@dataclass(frozen=True)
class GeneratedFile:
    """One file the scaffolder is about to write.

    ``kind`` is one of ``element``, ``docs``, ``demo``, ``import``, ``test``
    or ``harness``.  ``existed`` is filled in by
    :meth:`ElementGenerator.generate` and tells new files apart from
    rewritten ones.
    """

    path: Path
    content: str
    kind: str
    existed: bool = False


class ElementGenerator:
    """Scaffolds a single custom element into a project.

    Files are produced lazily by :meth:`plan` and written one at a time by
    :meth:`generate`, so a failing step leaves everything written before it
    in place and nothing after it.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        cwd: str | Path,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.cwd = Path(cwd)
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def resolve(self) -> ResolvedPaths:
        """Validate the config and resolve every scaffold location."""
        validate_config(self.config)
        return resolve_paths(self.config, self.cwd)

    def plan(self) -> Iterator[GeneratedFile]:
        """Yield every file to write, in write order.

        Raises ``ConfigError`` on the first ``next()`` for a bad element name,
        before any file is read.
        """
        resolved = self.resolve()
        context = build_context(self.config, resolved)
        element_dir = resolved.target_element_dir

        # 1. The element itself
        yield GeneratedFile(
            path=element_dir / f"{self.config.element_name}.html",
            content=self.renderer.render(ELEMENT_TEMPLATE, context),
            kind="element",
        )

        # 2. Documentation and demo pages
        if self.config.include_docs:
            yield GeneratedFile(
                path=element_dir / "index.html",
                content=self.renderer.render(DOCS_TEMPLATE, context),
                kind="docs",
            )
            yield GeneratedFile(
                path=element_dir / "demo" / "index.html",
                content=self.renderer.render(DEMO_TEMPLATE, context),
                kind="demo",
            )

        # 3. Import in elements.html
        if self.config.include_import:
            aggregator = resolved.aggregator_path
            yield GeneratedFile(
                path=aggregator,
                content=wire_import(read_text(aggregator), import_ref(self.config)),
                kind="import",
            )

        # 4. Test stub and harness registration
        if self.config.test_kind is not TestKind.NONE:
            yield from self._plan_tests(resolved)

    def generate(self, *, dry_run: bool = False) -> list[GeneratedFile]:
        """Write every planned file and return them in write order.

        With ``dry_run=True`` the plan is collected but nothing is written.
        """
        produced: list[GeneratedFile] = []
        for generated in self.plan():
            generated = replace(generated, existed=generated.path.exists())
            if not dry_run:
                write_text(generated.path, generated.content)
            produced.append(generated)
        return produced

    # -- Internal helpers --------------------------------------------------

    def _plan_tests(self, resolved: ResolvedPaths) -> Iterator[GeneratedFile]:
        harness = resolved.harness_path
        # A bad directive must fail before the stub is yielded.
        harness_text = register_suite(
            read_text(harness),
            self.config.basic_test_name,
            source=str(harness),
        )

        template = TEST_TEMPLATES[self.config.test_kind.value]
        yield GeneratedFile(
            path=resolved.test_dir / self.config.basic_test_name,
            content=self.renderer.render(template, build_test_context(self.config, resolved)),
            kind="test",
        )
        yield GeneratedFile(path=harness, content=harness_text, kind="harness")
