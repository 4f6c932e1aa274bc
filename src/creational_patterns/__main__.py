"""Allow ``python -m creational_patterns``."""
import sys

from creational_patterns.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
