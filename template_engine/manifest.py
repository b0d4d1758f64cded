"""Package manifest rewriting: target declarations and renaming."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .fs_utils import search_and_replace
from .logger import logger
from .types import StepResult, TargetDeclaration, TemplateLayout

if TYPE_CHECKING:
    from pathlib import Path

MANIFEST_CLOSING = "\n    ]\n)\n"

_TARGET_RE = re.compile(r'\.target\(\s*name:\s*"([^"]*)"')
_TEST_TARGET_RE = re.compile(r'\.testTarget\(\s*name:\s*"([^"]*)",\s*dependencies:\s*\[([^\]]*)\]')


def render_targets(targets: list[str], layout: TemplateLayout | None = None) -> str:
    """Render one target and one test target declaration per target."""
    layout = layout or TemplateLayout()
    return "".join(
        TargetDeclaration(name=target, test_name=layout.test_name(target)).render() for target in targets
    )


def rewrite_manifest_text(text: str, targets: list[str], layout: TemplateLayout | None = None) -> str | None:
    """Replace everything from the first target declaration onward.

    Returns None when the text has no target declaration to anchor on.
    """
    layout = layout or TemplateLayout()
    index = text.find(layout.target_marker)
    if index == -1:
        return None
    return text[:index] + render_targets(targets, layout) + MANIFEST_CLOSING


def amend_manifest_targets(
    manifest: Path,
    targets: list[str],
    layout: TemplateLayout | None = None,
) -> StepResult:
    """Regenerate the manifest's target declarations for the given targets."""
    result = StepResult(step="manifest")
    try:
        contents = manifest.read_text(encoding="utf-8")
    except OSError:
        result.fail(f"Failed to read text from {manifest}")
        return result

    new_text = rewrite_manifest_text(contents, targets, layout)
    if new_text is None:
        logger.warning("Missing target outline in template", manifest=str(manifest))
        result.warnings.append(f"Missing target outline in template: {manifest.name}")
        return result

    try:
        manifest.write_text(new_text, encoding="utf-8")
    except OSError:
        result.fail(f"Failed to write text to {manifest}")
        return result

    result.executed.extend(targets)
    logger.info("Manifest targets rewritten", manifest=manifest.name, targets=len(targets))
    return result


def rename_in_manifest(manifest: Path, original_name: str, package_name: str) -> StepResult:
    """Replace the template's package name with the new one throughout the manifest."""
    result = StepResult(step="manifest")
    error = search_and_replace(original_name, package_name, manifest)
    if error:
        result.fail(error)
    else:
        result.executed.append(f"{original_name} -> {package_name}")
    return result


def parse_declared_targets(text: str) -> tuple[list[str], dict[str, list[str]]]:
    """Return declared target names and each test target's dependencies."""
    targets = _TARGET_RE.findall(text)
    test_targets: dict[str, list[str]] = {}
    for name, deps in _TEST_TARGET_RE.findall(text):
        test_targets[name] = [dep.strip().strip('"') for dep in deps.split(",") if dep.strip()]
    return targets, test_targets
