"""Template engine domain types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    MANIFEST_FILE,
    SOURCE_EXTENSION,
    SOURCES_DIR,
    TARGET_MARKER,
    TEST_ENTRY_POINT,
    TEST_MANIFEST_FILE,
    TEST_SUFFIX,
    TESTS_DIR,
)


class TemplateLayout(BaseModel):
    """Names of the directories and files a template package is built from."""

    model_config = ConfigDict(extra="forbid")

    sources_dir: str = SOURCES_DIR
    tests_dir: str = TESTS_DIR
    manifest_file: str = MANIFEST_FILE
    target_marker: str = TARGET_MARKER
    source_extension: str = SOURCE_EXTENSION
    test_suffix: str = TEST_SUFFIX
    test_manifest_file: str = TEST_MANIFEST_FILE
    test_entry_point: str = TEST_ENTRY_POINT

    def test_name(self, target: str) -> str:
        return f"{target}{self.test_suffix}"

    def source_file(self, target: str) -> str:
        return f"{target}{self.source_extension}"

    def test_file(self, target: str) -> str:
        return f"{self.test_name(target)}{self.source_extension}"


class TemplateConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    primary_target: str | None = None
    layout: TemplateLayout = Field(default_factory=TemplateLayout)


class TargetDeclaration(BaseModel):
    name: str
    test_name: str
    dependencies: list[str] = Field(default_factory=list)

    def render(self) -> str:
        """Render the target and its test target as manifest entries."""
        deps = ", ".join(f'"{dep}"' for dep in self.dependencies)
        return (
            "\n"
            "        .target(\n"
            f'            name: "{self.name}",\n'
            f"            dependencies: [{deps}]),\n"
            "        .testTarget(\n"
            f'            name: "{self.test_name}",\n'
            f'            dependencies: ["{self.name}"]),'
        )


class StepResult(BaseModel):
    step: str
    success: bool = True
    executed: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    def fail(self, message: str) -> None:
        self.errors.append(message)
        self.success = False

    def merge(self, other: StepResult) -> None:
        """Fold another step's outcome into this one."""
        self.executed.extend(other.executed)
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)
        self.success = self.success and other.success


class InstantiateResult(BaseModel):
    success: bool
    package_name: str
    template: str
    destination: str
    original_name: str | None = None
    primary_target: str | None = None
    targets: list[str] = Field(default_factory=list)
    steps: list[StepResult] = Field(default_factory=list)
    committed: bool = False

    @property
    def errors(self) -> list[str]:
        return [f"{step.step}: {err}" for step in self.steps for err in step.errors]

    @property
    def warnings(self) -> list[str]:
        return [f"{step.step}: {warn}" for step in self.steps for warn in step.warnings]
