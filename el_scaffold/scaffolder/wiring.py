"""Import wiring for the elements aggregator file."""

from __future__ import annotations

from el_scaffold.config import ScaffoldConfig
from el_scaffold.scaffolder.paths import element_subdir
from el_scaffold.utils import to_posix

IMPORT_LINE = '<link rel="import" href="{href}.html">\n'


def import_ref(config: ScaffoldConfig) -> str:
    """Reference to the new element, relative to the elements directory.

    ``x-foo`` becomes ``x-foo/x-foo``; with ``nested_path="foo/bar"`` it
    becomes ``foo/bar/x-foo``. A leading ``/`` on the nested path is dropped.
    """
    return f"{element_subdir(config)}/{config.element_name}"


def wire_import(aggregator_text: str, target_ref: str) -> str:
    """Append an HTML import of *target_ref* to the aggregator text.

    Backslashes in *target_ref* are converted to forward slashes.  No
    duplicate check is made: wiring the same reference twice yields two
    identical lines.
    """
    return aggregator_text + IMPORT_LINE.format(href=to_posix(target_ref))
