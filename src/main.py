import logging
import sys
from dotenv import load_dotenv
from cli import SacredGeometryCLI
from config.config import Config


def main() -> int:
    # Load environment variables
    load_dotenv()

    try:
        config = Config()
    except ValueError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr, flush=True)
        raise

    # Configure logging
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        SacredGeometryCLI(config).run()
    except (EOFError, KeyboardInterrupt):
        # Input closed at a prompt
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
