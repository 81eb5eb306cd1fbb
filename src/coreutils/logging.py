import logging
import os
from datetime import datetime

# Azure SDK loggers are chatty at INFO (every HTTP request/response)
NOISY_LOGGERS = ("azure", "azure.core.pipeline.policies.http_logging_policy")


def setup_logging(level=logging.INFO, log_dir: str | None = "logs"):
    """Setup basic logging configuration"""
    handlers = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(
                    log_dir, f"sample_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            )
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger(__name__)


def log_listing(logger: logging.Logger, title: str, lines):
    """Log a Start/End framed block of listing lines"""
    logger.info(f"📊 Start ------- {title}")
    for line in lines:
        logger.info(f"   {line}")
    logger.info(f"📊 End --------- {title}")
