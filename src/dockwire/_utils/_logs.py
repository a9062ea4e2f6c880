import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("dockwire")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)

    if should_debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)
