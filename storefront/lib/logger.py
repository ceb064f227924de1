# ================== LOGURU LOGGER CONFIG =====================
import os
import sys

from loguru import logger

LOG_DIR = os.environ.get("LOG_DIR") or "logs"
os.makedirs(LOG_DIR, exist_ok=True)

log_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>order:{extra[order_number]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, colorize=True, format=log_format, level="INFO")
logger.add(
    os.path.join(LOG_DIR, "storefront_service.json"),
    rotation="100 MB",
    retention="10 days",
    compression="zip",
    serialize=True,
    level="DEBUG",
    enqueue=True,
    catch=True,
)
configured_logger = logger.patch(
    lambda record: record["extra"].setdefault("order_number", "NO_ORDER")
)


def order_logger(order_number):
    """Logger bound to one order so every line of its workflow can be grepped."""
    return configured_logger.bind(order_number=order_number)


# ================== EXPORT LOGGER =====================
log = configured_logger
