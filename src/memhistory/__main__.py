"""Entry point for the memhistory explorer."""

import sys

from .app import run_app
from .config import Config


def main() -> int:
    """Main entry point for the memhistory explorer."""
    try:
        config = Config.load()
        run_app(config)
        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
