"""Template engine constants."""

from __future__ import annotations

SOURCES_DIR = "Sources"
TESTS_DIR = "Tests"
MANIFEST_FILE = "Package.swift"
TARGET_MARKER = ".target("
SOURCE_EXTENSION = ".swift"
TEST_SUFFIX = "Tests"
TEST_MANIFEST_FILE = "XCTestManifests.swift"
TEST_ENTRY_POINT = "LinuxMain.swift"
CONFIG_FILE = "template.yaml"
PACKAGE_NAME_PLACEHOLDER = "__PACKAGE_NAME__"
TARGET_NAME_PLACEHOLDER = "__TARGET_NAME__"
PLACEHOLDERS = (PACKAGE_NAME_PLACEHOLDER, TARGET_NAME_PLACEHOLDER)
STAGING_PREFIX = ".staging-"
