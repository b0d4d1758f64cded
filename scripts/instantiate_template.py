"""Create a new package from a template package."""

from __future__ import annotations

import argparse
import json
import sys

from template_engine.instantiate import instantiate_template
from template_engine.logger import install_exception_hooks


def main() -> None:
    install_exception_hooks()

    parser = argparse.ArgumentParser(description="Create a package from a template package")
    parser.add_argument("name", help="Name of the new package")
    parser.add_argument("template", help="Path to the template package")
    parser.add_argument("destination", help="Where to create the new package")
    parser.add_argument("--primary-target", help="Template target to rename to the package name")
    args = parser.parse_args()

    try:
        result = instantiate_template(
            args.name,
            args.template,
            args.destination,
            primary_target=args.primary_target,
        )
    except (ValueError, FileNotFoundError) as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)

    output = result.model_dump()
    output["errors"] = result.errors
    output["warnings"] = result.warnings
    print(json.dumps(output, indent=2))

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
