import sys
from loguru import logger

from src.util.config import CatalogSettings

_settings = CatalogSettings.from_env()

# Remove default handler (to avoid double printing)
logger.remove()

# Add Console Handler (Pretty colors, show File + Line Number)
logger.add(
    sys.stderr,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=_settings.log_level
)

# Add file handler only when configured
if _settings.log_file:
    logger.add(
        _settings.log_file,
        rotation="10MB",
        retention="10 days",
        level="DEBUG",
        compression="zip"
    )

# Export the logger so other files can import it
__all__ = ["logger"]
