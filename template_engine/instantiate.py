"""Instantiate a new package from a template package."""

from __future__ import annotations

import contextlib
import shutil
import uuid
from pathlib import Path

from .config import load_template_config
from .constants import STAGING_PREFIX
from .copier import copy_template
from .discover import discover_targets, resolve_primary_target
from .logger import logger
from .manifest import amend_manifest_targets, rename_in_manifest
from .rename import rename_primary_sources, rename_targets, substitute_placeholders
from .types import InstantiateResult, StepResult, TemplateLayout


class TemplateInstantiator:
    """Create a package at destination_path from the template at source_path.

    The template is copied into a staging directory next to the
    destination, renamed there, and moved onto the destination in a single
    rename once every step has run. Steps keep going after recoverable
    failures; everything that went wrong is reported on the result.
    """

    def __init__(
        self,
        name: str,
        source_path: str | Path,
        destination_path: str | Path,
        *,
        primary_target: str | None = None,
        layout: TemplateLayout | None = None,
    ) -> None:
        if not name or not name.strip():
            raise ValueError("Package name must not be empty")
        if "/" in name or "\\" in name:
            raise ValueError(f"Package name must not contain path separators: {name!r}")

        self.source_path = str(source_path)
        self.template_dir = Path(source_path)
        if not self.template_dir.is_dir():
            raise FileNotFoundError(f"Template directory not found: {self.template_dir}")

        self.destination = Path(destination_path)
        self.pkg_name = name

        config = load_template_config(self.template_dir)
        self.primary_target = primary_target or config.primary_target
        self.layout = layout or config.layout

    def _new_result(self) -> InstantiateResult:
        return InstantiateResult(
            success=False,
            package_name=self.pkg_name,
            template=str(self.template_dir),
            destination=str(self.destination),
        )

    def _check_destination(self) -> StepResult:
        result = StepResult(step="preflight")
        try:
            if not self.destination.exists():
                self.destination.parent.mkdir(parents=True, exist_ok=True)
            elif not self.destination.is_dir():
                result.fail(f"Destination exists and is not a directory: {self.destination}")
            elif any(self.destination.iterdir()):
                result.fail(f"Destination is not empty: {self.destination}")
        except OSError as err:
            result.fail(f"Cannot prepare destination {self.destination}: {err}")
        return result

    def _staging_dir(self) -> Path:
        return self.destination.parent / f".{self.destination.name}{STAGING_PREFIX}{uuid.uuid4().hex[:8]}"

    def _build(self, staging: Path, result: InstantiateResult) -> bool:
        """Run every pipeline step against the staging tree.

        Returns False when the tree is unusable and must not be committed.
        """
        entries, copy_result = copy_template(self.template_dir, staging)
        result.steps.append(copy_result)
        if not copy_result.success:
            return False

        try:
            targets = discover_targets(self.template_dir, self.layout)
        except OSError as err:
            failed = StepResult(step="discover")
            failed.fail(str(err))
            result.steps.append(failed)
            return False

        original_name, discover_result = resolve_primary_target(self.source_path, targets, self.primary_target)
        result.steps.append(discover_result)
        result.targets = targets
        result.original_name = original_name
        result.primary_target = original_name

        manifest = staging / self.layout.manifest_file
        manifest_result = StepResult(step="manifest")
        if manifest.is_file():
            manifest_result.merge(amend_manifest_targets(manifest, targets, self.layout))
            manifest_result.merge(rename_in_manifest(manifest, original_name, self.pkg_name))
        else:
            manifest_result.warnings.append(f"Template has no {self.layout.manifest_file}")
        result.steps.append(manifest_result)

        result.steps.append(
            rename_targets(staging, self.template_dir, targets, original_name, self.pkg_name, self.layout)
        )
        result.steps.append(rename_primary_sources(staging, original_name, self.pkg_name, self.layout))
        result.steps.append(substitute_placeholders(staging, entries, self.pkg_name))
        return True

    def _commit(self, staging: Path) -> StepResult:
        result = StepResult(step="commit")
        removed_empty = False
        try:
            if self.destination.exists():
                self.destination.rmdir()
                removed_empty = True
            staging.rename(self.destination)
        except OSError as err:
            if removed_empty:
                with contextlib.suppress(OSError):
                    self.destination.mkdir(exist_ok=True)
            result.fail(f"Cannot move staged package to {self.destination}: {err}")
            shutil.rmtree(staging, ignore_errors=True)
            return result
        result.executed.append(str(self.destination))
        return result

    def run(self) -> InstantiateResult:
        """Copy, rename and commit the template. Never raises for filesystem errors."""
        result = self._new_result()
        log = logger.bind(package=self.pkg_name, template=str(self.template_dir))

        preflight = self._check_destination()
        result.steps.append(preflight)
        if not preflight.success:
            log.error("Cannot instantiate template", errors=preflight.errors)
            return result

        staging = self._staging_dir()
        try:
            if self._build(staging, result):
                commit = self._commit(staging)
                result.steps.append(commit)
                result.committed = commit.success
            else:
                shutil.rmtree(staging, ignore_errors=True)
        except Exception:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        result.success = result.committed and not result.errors
        for warning in result.warnings:
            log.warning("Template warning", detail=warning)
        if result.success:
            log.info("Package created", destination=str(self.destination), targets=result.targets)
        else:
            log.error("Package created with errors" if result.committed else "Package not created", errors=result.errors)
        return result


def instantiate_template(
    name: str,
    source_path: str | Path,
    destination_path: str | Path,
    *,
    primary_target: str | None = None,
    layout: TemplateLayout | None = None,
) -> InstantiateResult:
    """Create a package from a template in one call."""
    return TemplateInstantiator(
        name,
        source_path,
        destination_path,
        primary_target=primary_target,
        layout=layout,
    ).run()
