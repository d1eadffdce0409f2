"""Logging setup for gridterm.

Library modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and never install handlers themselves. The command line calls
``setup_logging()`` once; it logs to a rotating file because the
window owns the terminal while it runs.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

DEFAULT_LOG_DIR = Path.home() / ".config" / "gridterm"


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> Path:
    """
    Send gridterm's log records to ``<log_dir>/gridterm.log``.

    The root logger stays at WARNING; ``gridterm.*`` loggers log at INFO,
    or DEBUG when ``verbose`` is set. Returns the log file path.
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "gridterm.log"

    root = logging.getLogger()
    if not any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_file
        for h in root.handlers
    ):
        handler = RotatingFileHandler(
            log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("gridterm").setLevel(logging.DEBUG if verbose else logging.INFO)
    return log_file
