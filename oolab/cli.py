"""Runs the three class examples one after another."""

from __future__ import annotations

import argparse
import sys

from oolab import complex_vector, icosahedron, vec2


def main(argv: list[str] | None = None) -> int:
    """Run the icosahedron, Vec2 and complex vector examples on standard input."""
    parser = argparse.ArgumentParser(
        prog="oolab", description="Run the class examples in turn."
    )
    parser.parse_args(argv)
    print(" Lab #3  !")
    try:
        for example in (icosahedron, vec2, complex_vector):
            example.run_example(sys.stdin, sys.stdout)
    except (EOFError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0