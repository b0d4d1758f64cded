"""Copy a template package into a working directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .fs_utils import copy_dir, list_dir
from .logger import logger
from .types import StepResult

if TYPE_CHECKING:
    from pathlib import Path


def copy_template(template_dir: Path, dest: Path) -> tuple[list[str], StepResult]:
    """Recursively copy template_dir into dest.

    Returns the names of the template's top-level entries together with
    the step outcome. The entry list is empty when the copy failed.
    """
    result = StepResult(step="copy")
    try:
        entries = list_dir(template_dir)
        dest.mkdir(parents=True, exist_ok=True)
        copy_dir(template_dir, dest)
    except OSError as err:
        logger.error("Cannot copy template into destination", template=str(template_dir), error=str(err))
        result.fail(f"Cannot copy template into destination: {err}")
        return [], result

    result.executed.extend(entries)
    logger.debug("Template copied", template=str(template_dir), entries=len(entries))
    return entries, result
