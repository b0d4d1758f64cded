"""Rename a copied template's targets, test targets, and placeholders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import PLACEHOLDERS
from .fs_utils import copy_path, move_path, search_and_replace
from .logger import logger
from .types import StepResult, TemplateLayout

if TYPE_CHECKING:
    from pathlib import Path


def _rename_primary_tests(tests_dir: Path, original_name: str, package_name: str, layout: TemplateLayout) -> None:
    old_dir = tests_dir / layout.test_name(original_name)
    new_dir = tests_dir / layout.test_name(package_name)
    move_path(old_dir, new_dir)
    move_path(new_dir / layout.test_file(original_name), new_dir / layout.test_file(package_name))


def _add_target_tests(
    template_tests: Path,
    tests_dir: Path,
    target: str,
    original_name: str,
    layout: TemplateLayout,
    result: StepResult,
) -> None:
    target_dir = tests_dir / layout.test_name(target)
    copy_path(template_tests, target_dir)
    test_file = target_dir / layout.test_file(target)
    move_path(target_dir / layout.test_file(original_name), test_file)

    for path in (test_file, target_dir / layout.test_manifest_file):
        if not path.exists():
            result.warnings.append(f"{target}: no {path.name} to update")
            continue
        error = search_and_replace(original_name, target, path)
        if error:
            result.fail(error)


def rename_targets(
    root: Path,
    template_dir: Path,
    targets: list[str],
    original_name: str,
    package_name: str,
    layout: TemplateLayout | None = None,
) -> StepResult:
    """Create one test directory per target, named after that target.

    The primary target's test directory is moved to the new package name.
    Every other target gets a fresh copy of the template's primary test
    directory, taken from the untouched template so it can be reused.
    A failing target is recorded and the next one is processed.
    """
    layout = layout or TemplateLayout()
    result = StepResult(step="rename-tests")
    tests_dir = root / layout.tests_dir
    template_tests = template_dir / layout.tests_dir / layout.test_name(original_name)

    if not template_tests.is_dir():
        result.warnings.append(f"Template has no {layout.tests_dir}/{template_tests.name} directory")
        return result

    for target in targets:
        try:
            if target == original_name:
                if package_name != original_name:
                    _rename_primary_tests(tests_dir, original_name, package_name, layout)
                    result.executed.append(layout.test_name(package_name))
                continue

            if (tests_dir / layout.test_name(target)).exists():
                result.warnings.append(f"{target}: {layout.test_name(target)} already exists, keeping it")
                continue
            _add_target_tests(template_tests, tests_dir, target, original_name, layout, result)
            result.executed.append(layout.test_name(target))
        except OSError as err:
            logger.error("Could not copy directory", target=target, error=str(err))
            result.fail(f"{target}: could not create test directory: {err}")

    return result


def rename_primary_sources(
    root: Path,
    original_name: str,
    package_name: str,
    layout: TemplateLayout | None = None,
) -> StepResult:
    """Rename the primary target's sources and test entry point to the package name."""
    layout = layout or TemplateLayout()
    result = StepResult(step="rename-sources")
    if package_name == original_name:
        return result

    sources_dir = root / layout.sources_dir
    new_dir = sources_dir / package_name
    try:
        move_path(sources_dir / original_name, new_dir)
        move_path(new_dir / layout.source_file(original_name), new_dir / layout.source_file(package_name))
        result.executed.append(f"{layout.sources_dir}/{package_name}")
    except OSError as err:
        logger.error("Files could not be renamed", target=original_name, error=str(err))
        result.fail(f"Files could not be renamed: {err}")

    entry_point = root / layout.tests_dir / layout.test_entry_point
    if entry_point.exists():
        error = search_and_replace(original_name, package_name, entry_point)
        if error:
            result.fail(error)
        else:
            result.executed.append(f"{layout.tests_dir}/{layout.test_entry_point}")

    return result


def _read_text(path: Path) -> str | None:
    """Return a file's text, or None for unreadable and binary files."""
    try:
        data = path.read_bytes()
    except OSError:
        return None
    if b"\0" in data:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _walk_files(path: Path) -> list[Path]:
    if path.is_symlink():
        return []
    if path.is_dir():
        return [f for f in sorted(path.rglob("*")) if f.is_file() and not f.is_symlink()]
    return [path] if path.is_file() else []


def substitute_placeholders(root: Path, entries: list[str], package_name: str) -> StepResult:
    """Replace the generic placeholder tokens with the package name.

    Walks every copied top-level entry, descending into directories.
    Binary files are left alone.
    """
    result = StepResult(step="placeholders")
    for entry in entries:
        for path in _walk_files(root / entry):
            text = _read_text(path)
            if text is None or not any(token in text for token in PLACEHOLDERS):
                continue
            for token in PLACEHOLDERS:
                error = search_and_replace(token, package_name, path)
                if error:
                    result.fail(error)
                    break
            else:
                result.executed.append(str(path.relative_to(root)))
    return result
