"""
Root logger setup. Modules log through logging.getLogger(__name__).
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger once. Later calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest, or a repeated create_app call)
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
