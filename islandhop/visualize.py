"""
Standalone CLI for printing an ASCII map of a level.

Usage:
    python -m islandhop.visualize levels/level1.yaml
    python -m islandhop.visualize --example
"""

import argparse
import sys

from .level import example_level, load_level
from .utils.course_visualizer import visualize


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print an ASCII map of an islandhop level",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Legend:
  0-9  island index (last digit)
  S/E  course start / end
  +    junction
  #    road
        """
    )
    parser.add_argument(
        "level",
        nargs="?",
        help="Path to the YAML level file"
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Map the built-in example level"
    )

    args = parser.parse_args(argv)

    if args.example:
        level = example_level()
    elif args.level:
        try:
            level, errors = load_level(args.level)
        except Exception as e:
            print(f"Error loading level {args.level}: {e}", file=sys.stderr)
            return 1
        if level is None:
            for error in errors:
                print(f"Error: {error}", file=sys.stderr)
            return 1
    else:
        print("Error: level file required (or use --example)", file=sys.stderr)
        return 1

    print(visualize(level.course, level.islands))
    return 0


if __name__ == "__main__":
    sys.exit(main())
