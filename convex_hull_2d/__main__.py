"""Command-line interface."""
import sys

from convex_hull_2d.main import main

if __name__ == "__main__":
    sys.exit(main())
