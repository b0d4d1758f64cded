"""Shared fixtures for template engine tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import yaml

if TYPE_CHECKING:
    from pathlib import Path


def manifest_text(name: str, *, with_targets: bool = True) -> str:
    targets = (
        "        .target(\n"
        f'            name: "{name}",\n'
        "            dependencies: []),\n"
        "        .testTarget(\n"
        f'            name: "{name}Tests",\n'
        f'            dependencies: ["{name}"]),\n'
        if with_targets
        else ""
    )
    return (
        "// swift-tools-version:4.2\n"
        "import PackageDescription\n"
        "\n"
        "let package = Package(\n"
        f'    name: "{name}",\n'
        "    dependencies: [],\n"
        "    targets: [\n"
        f"{targets}"
        "    ]\n"
        ")\n"
    )


def source_text(target: str) -> str:
    return f'struct {target} {{\n    var text = "Hello, World!"\n}}\n'


def xctest_text(name: str) -> str:
    return (
        "import XCTest\n"
        f"@testable import {name}\n"
        "\n"
        f"final class {name}Tests: XCTestCase {{\n"
        "    func testExample() {\n"
        f'        XCTAssertEqual({name}().text, "Hello, World!")\n'
        "    }\n"
        "\n"
        "    static var allTests = [\n"
        '        ("testExample", testExample),\n'
        "    ]\n"
        "}\n"
    )


def create_template_package(
    tmp_dir: Path,
    *,
    name: str = "Foo",
    targets: list[str] | None = None,
    manifest: str | None = None,
    with_tests: bool = True,
    readme: str | None = "# __PACKAGE_NAME__\n\nMain target: __TARGET_NAME__\n",
    extra_files: dict[str, str | bytes] | None = None,
    config: dict[str, Any] | None = None,
    primary: str | None = None,
) -> Path:
    """Create a template package tree at tmp_dir/templates/<name>."""
    template_dir = tmp_dir / "templates" / name
    template_dir.mkdir(parents=True, exist_ok=True)
    primary = primary or name
    targets = targets if targets is not None else [name]

    (template_dir / "Package.swift").write_text(
        manifest if manifest is not None else manifest_text(primary), encoding="utf-8"
    )
    if readme is not None:
        (template_dir / "README.md").write_text(readme, encoding="utf-8")

    sources = template_dir / "Sources"
    sources.mkdir()
    for target in targets:
        (sources / target).mkdir()
        (sources / target / f"{target}.swift").write_text(source_text(target), encoding="utf-8")

    if with_tests:
        test_dir = template_dir / "Tests" / f"{primary}Tests"
        test_dir.mkdir(parents=True)
        (test_dir / f"{primary}Tests.swift").write_text(xctest_text(primary), encoding="utf-8")
        (test_dir / "XCTestManifests.swift").write_text(
            "import XCTest\n"
            "\n"
            "#if !os(macOS)\n"
            "public func allTests() -> [XCTestCaseEntry] {\n"
            "    return [\n"
            f"        testCase({primary}Tests.allTests),\n"
            "    ]\n"
            "}\n"
            "#endif\n",
            encoding="utf-8",
        )
        (template_dir / "Tests" / "LinuxMain.swift").write_text(
            "import XCTest\n"
            "\n"
            f"import {primary}Tests\n"
            "\n"
            "var tests = [XCTestCaseEntry]()\n"
            f"tests += {primary}Tests.allTests()\n"
            "XCTMain(tests)\n",
            encoding="utf-8",
        )

    for rel_path, content in (extra_files or {}).items():
        full_path = template_dir / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            full_path.write_bytes(content)
        else:
            full_path.write_text(content, encoding="utf-8")

    if config is not None:
        (template_dir / "template.yaml").write_text(yaml.safe_dump(config), encoding="utf-8")

    return template_dir


def tree_texts(root: Path) -> dict[str, str]:
    """Map every text file under root to its contents."""
    texts: dict[str, str] = {}
    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        try:
            texts[str(path.relative_to(root))] = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            continue
    return texts


@pytest.fixture()
def template_tmp(tmp_path: Path) -> Path:
    """Temp directory holding templates/ and an output location."""
    (tmp_path / "out").mkdir()
    return tmp_path
