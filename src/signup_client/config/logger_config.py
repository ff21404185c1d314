"""Logger configuration for the signup client."""

import sys

from loguru import logger

from .settings import SignupConfig


def setup_logging(config: SignupConfig) -> None:
    """Configure loguru logger for console and optional file output.

    Console output goes to stderr so it never interleaves with the rendered
    form on stdout. The file sink rotates and compresses according to the
    configuration.
    """

    # Remove default loguru handler
    logger.remove()

    if config.log_to_console:
        logger.add(
            sink=sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=config.log_level,
            colorize=True,
        )

    if config.log_to_file:
        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink=str(config.log_file_path),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=config.log_level,
            rotation=config.log_rotation,
            retention=config.log_retention,
            compression="gz",
        )

        logger.debug(f"File logging enabled: {config.log_file_path}")
