"""Target path resolution.

Turns a ``ScaffoldConfig`` plus the project root into every directory and
file location the scaffolder touches.  Resolution is pure: nothing here reads
or writes the file system.
"""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path

from el_scaffold.config import (
    DEFAULT_APP_DIR,
    DEFAULT_DEP_CACHE_DIR,
    DEFAULT_ELEMENTS_DIR,
    ScaffoldConfig,
)
from el_scaffold.utils import as_dir, to_posix

AGGREGATOR_FILENAME = "elements.html"
HARNESS_RELATIVE_PATH = "test/index.html"


@dataclass(frozen=True)
class ResolvedPaths:
    """Every location derived from a config.

    ``app_root``, ``elements_root`` and ``dep_cache_root`` are normalized
    forward-slash directory strings ending in ``/``, relative to ``cwd``
    unless an override made them absolute.  ``target_element_dir`` is
    absolute.
    """

    cwd: Path
    app_root: str
    elements_root: str
    dep_cache_root: str
    target_element_dir: Path
    relative_dep_cache_path: str

    @property
    def aggregator_path(self) -> Path:
        """Absolute path to ``elements.html``."""
        return self.cwd / self.elements_root / AGGREGATOR_FILENAME

    @property
    def harness_path(self) -> Path:
        """Absolute path to the test harness entry file."""
        return self.cwd / self.app_root / HARNESS_RELATIVE_PATH

    @property
    def test_dir(self) -> Path:
        """Absolute path to the directory holding test stubs."""
        return self.cwd / self.app_root / "test"

    @property
    def dep_cache_dir(self) -> Path:
        """Absolute path to the dependency cache."""
        return self.cwd / self.dep_cache_root


def relative_path(target: Path, start: Path) -> str:
    """Forward-slash path leading from directory *start* to *target*."""
    return to_posix(os.path.relpath(target, start))


def element_subdir(config: ScaffoldConfig) -> str:
    """Directory of the element relative to the elements root, forward-slashed.

    Leading separators on ``nested_path`` are dropped so it is always joined
    under the elements root: ``"/foo/bar"`` becomes ``"foo/bar"``.
    """
    if not config.nested_path:
        return config.element_name
    subdir = posixpath.normpath(to_posix(config.nested_path)).lstrip("/")
    return subdir or "."


def resolve_paths(config: ScaffoldConfig, cwd: str | Path) -> ResolvedPaths:
    """Resolve all scaffold locations for *config* under project root *cwd*.

    The element name is not validated here; call
    :func:`el_scaffold.config.validate_config` first.
    """
    root = Path(os.path.abspath(cwd))

    app_root = as_dir(config.app_root or DEFAULT_APP_DIR)
    elements_root = as_dir(app_root + (config.elements_root or DEFAULT_ELEMENTS_DIR))
    dep_cache_root = as_dir(app_root + (config.dep_cache_root or DEFAULT_DEP_CACHE_DIR))

    target_element_dir = Path(
        os.path.normpath(root / elements_root / element_subdir(config))
    )
    relative_dep_cache = relative_path(root / dep_cache_root, target_element_dir)

    return ResolvedPaths(
        cwd=root,
        app_root=app_root,
        elements_root=elements_root,
        dep_cache_root=dep_cache_root,
        target_element_dir=target_element_dir,
        relative_dep_cache_path=relative_dep_cache,
    )
