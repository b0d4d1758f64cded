"""Template engine for instantiating new packages from template packages."""

from __future__ import annotations

from .config import load_template_config
from .constants import (
    CONFIG_FILE,
    MANIFEST_FILE,
    PACKAGE_NAME_PLACEHOLDER,
    PLACEHOLDERS,
    SOURCES_DIR,
    TARGET_MARKER,
    TARGET_NAME_PLACEHOLDER,
    TESTS_DIR,
)
from .copier import copy_template
from .discover import discover_targets, original_package_name, resolve_primary_target
from .fs_utils import copy_dir, copy_path, list_dir, move_path, search_and_replace
from .instantiate import TemplateInstantiator, instantiate_template
from .manifest import (
    amend_manifest_targets,
    parse_declared_targets,
    rename_in_manifest,
    render_targets,
    rewrite_manifest_text,
)
from .rename import rename_primary_sources, rename_targets, substitute_placeholders
from .types import (
    InstantiateResult,
    StepResult,
    TargetDeclaration,
    TemplateConfig,
    TemplateLayout,
)

__all__ = [
    # config
    "load_template_config",
    # constants
    "CONFIG_FILE",
    "MANIFEST_FILE",
    "PACKAGE_NAME_PLACEHOLDER",
    "PLACEHOLDERS",
    "SOURCES_DIR",
    "TARGET_MARKER",
    "TARGET_NAME_PLACEHOLDER",
    "TESTS_DIR",
    # copier
    "copy_template",
    # discover
    "discover_targets",
    "original_package_name",
    "resolve_primary_target",
    # fs_utils
    "copy_dir",
    "copy_path",
    "list_dir",
    "move_path",
    "search_and_replace",
    # instantiate
    "TemplateInstantiator",
    "instantiate_template",
    # manifest
    "amend_manifest_targets",
    "parse_declared_targets",
    "rename_in_manifest",
    "render_targets",
    "rewrite_manifest_text",
    # rename
    "rename_primary_sources",
    "rename_targets",
    "substitute_placeholders",
    # types
    "InstantiateResult",
    "StepResult",
    "TargetDeclaration",
    "TemplateConfig",
    "TemplateLayout",
]
