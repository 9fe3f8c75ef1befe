import logging
import sys

def setup_logging(level: int = logging.INFO):
    """
    Configure the application's root logger.

    Uses the format "timestamp - logger name - level - message" for records and attaches a StreamHandler that writes logs to stderr, keeping stdout free for rendered tensors.

    Parameters:
        level (int): Root log level, INFO by default. Pass logging.DEBUG to see matrix product shapes and in-place transposes.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
