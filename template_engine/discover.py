"""Target discovery and primary target resolution."""

from __future__ import annotations

import re
from pathlib import Path

from .types import StepResult, TemplateLayout

_SEPARATORS = re.compile(r"[\\/]")


def discover_targets(template_dir: Path, layout: TemplateLayout | None = None) -> list[str]:
    """List the targets declared by a template's sources directory.

    Targets come back in the order the filesystem lists them, which is
    also the order the manifest declares them in.
    """
    layout = layout or TemplateLayout()
    sources = template_dir / layout.sources_dir
    if not sources.is_dir():
        raise FileNotFoundError(f"Sources directory not found: {sources}")
    return [entry.name for entry in sources.iterdir() if not entry.name.startswith(".")]


def original_package_name(template_path: str | Path) -> str:
    """Return the last non-empty component of a template path.

    Trailing separators are ignored, so "/tpl/Foo/" yields "Foo". A path
    ending in "." or ".." is resolved first so the real directory name is
    used.
    """
    components = [part for part in _SEPARATORS.split(str(template_path)) if part]
    if not components:
        raise ValueError(f"Cannot derive a package name from path: {template_path!r}")
    name = components[-1]
    if name in (".", ".."):
        name = Path(template_path).resolve().name
        if not name:
            raise ValueError(f"Cannot derive a package name from path: {template_path!r}")
    return name


def resolve_primary_target(
    template_path: str | Path,
    targets: list[str],
    explicit: str | None = None,
) -> tuple[str, StepResult]:
    """Pick the template's primary target.

    An explicit name wins; otherwise the template directory's own name is
    used. A primary target missing from the discovered targets is reported
    as a warning and nothing gets renamed for it.
    """
    result = StepResult(step="discover")
    primary = explicit or original_package_name(template_path)
    result.executed.extend(targets)

    if not targets:
        result.warnings.append(f"No targets found under {template_path}")
    elif primary not in targets:
        result.warnings.append(
            f"Primary target {primary!r} does not match any target in {template_path}: {', '.join(targets)}"
        )
    return primary, result
