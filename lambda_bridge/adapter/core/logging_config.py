import os
from pathlib import Path
from typing import Optional

from lambda_bridge.common.core.logging_config import setup_logging as common_setup_logging

DEFAULT_LOG_CONFIG_PATH = str(
    Path(__file__).resolve().parent.parent / "resources" / "adapter_log.yaml"
)


def setup_logging(config_path: Optional[str] = None):
    """
    Load the YAML config and initialize logging.

    An explicit path wins, then LOG_CONFIG_PATH, then the packaged default.
    """
    path = config_path or os.getenv("LOG_CONFIG_PATH") or DEFAULT_LOG_CONFIG_PATH
    common_setup_logging(path)
