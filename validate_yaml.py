#!/usr/bin/env python3
"""Validate WOF records files against the schema."""
import sys
from pathlib import Path

import yaml
from jsonschema import Draft7Validator

from wof import config


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


class RecordsFileLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted dates as their YYYY-MM-DD text."""


RecordsFileLoader.add_constructor("tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str)


def validate_records_file(filepath: Path, schema: dict) -> list[str]:
    """
    Validate a single records file.

    Returns every schema violation, ordered by location, each followed by
    its path inside the file.
    """
    try:
        with open(filepath) as f:
            data = yaml.load(f, Loader=RecordsFileLoader)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    errors = []
    violations = Draft7Validator(schema).iter_errors(data)
    for error in sorted(violations, key=lambda e: [str(p) for p in e.absolute_path]):
        errors.append(f"Schema validation error: {error.message}")
        if error.absolute_path:
            errors.append(f"  at path: {'.'.join(str(p) for p in error.absolute_path)}")
    return errors


def main(argv=None):
    """Validate the given records files, or the configured one."""
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]
    if not paths:
        paths = [config.data_file()]

    schema = load_schema()
    all_valid = True
    for filepath in paths:
        errors = validate_records_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
