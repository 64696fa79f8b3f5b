import logging
import sys

from tomlquery import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logging.warning("Interrupted by user, terminating...")
        raise
