import logging

from resume_builder.app.core.config import Settings

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from application settings.

    Args:
        settings (Settings): The application settings; `log_level` selects the root level.

    Returns:
        None

    Notes:
        1. Resolve the level name case-insensitively; unknown names fall back to INFO.
        2. Apply `logging.basicConfig` with the shared format. Handlers installed
           earlier (for example by uvicorn or pytest) are left in place.
        3. Set the root level explicitly so a reconfiguration takes effect.

    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)

    _msg = f"Logging configured at level {logging.getLevelName(level)}"
    log.debug(_msg)
