"""
Main entry point for validating islandhop levels.

Usage:
    python -m islandhop.main level.yaml
    python -m islandhop.main level.yaml --config game.yaml --output reports/level.json --verbose
    python -m islandhop.main --example
"""

import argparse
import json
import sys
from pathlib import Path

from .config import GameConfig, load_config
from .level import Level, example_level, load_level
from .verifiers import ValidationResult, filter_cascading_errors, format_result


def print_details(level: Level, result: ValidationResult) -> None:
    """Print the derived course facts in verbose mode."""
    print(f"Start: {tuple(level.course.start)}  End: {tuple(level.course.end_location())}")
    print(f"Spans: {len(level.course.spans)}  Islands: {len(level.islands)}  Bridges: {len(result.bridges)}")

    for bridge, span_range in zip(result.bridges, result.ranges):
        print(
            f"  Bridge span {bridge.span_index}: island {bridge.start_island} -> {bridge.end_island} "
            f"along {bridge.axis.value}, safe length {span_range.min_safe:.2f}-{span_range.max_safe:.2f}"
        )

    for animation in level.bridge_animation_data():
        print(
            f"  Bridge {animation.bridge_index}: target {animation.target_length:.2f}, "
            f"hold {animation.hold_time:.2f}s"
        )

    print("-" * 40)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate an islandhop level",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example level.yaml:
  start: [1, 1]
  moves: C+4 R5 R3 C2 R4 C3 R-4
  islands:
    - [0, 0, 2, 2]
    - [0, 4, 2, 2]
        """
    )
    parser.add_argument(
        "level",
        nargs="?",
        help="Path to YAML level file (not needed with --example)"
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Validate the built-in example level"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML game configuration"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the derived level facts as JSON"
    )
    parser.add_argument(
        "--max-errors",
        type=int,
        default=5,
        help="Maximum number of errors to print (default 5)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print bridges and derived facts to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.example:
        level = example_level(config)
        label = "Example level"
    else:
        if not args.level:
            print("Error: level file required (or use --example)", file=sys.stderr)
            return 1

        try:
            level, parse_errors = load_level(args.level, config)
        except Exception as e:
            print(f"Error loading level {args.level}: {e}", file=sys.stderr)
            return 1

        label = Path(args.level).name
        if level is None:
            print(f"=== {label} ===")
            print(f"✗ Could not read level ({len(parse_errors)} error(s)):")
            for error in filter_cascading_errors(parse_errors, max_errors=args.max_errors):
                print(f"  - {error}")
            return 1

    result = level.validate()

    if args.verbose:
        print(f"Level: {label}")
        print_details(level, result)

    for line in format_result(result, label=label, max_errors=args.max_errors):
        print(line)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(level.summary(), f, indent=2, default=str)
        if args.verbose:
            print(f"\nReport saved to: {output_path}")

    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
