"""
Environment validation utilities for Lambda.
"""

import logging
import os
from typing import Dict

from doc_chatbot.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Each required setting with the environment variables accepted for it, in priority order
REQUIRED_VARS = {"BUCKET_NAME": ["BUCKET_NAME", "CHATBOT_BUCKET_NAME"]}


def validate_environment() -> Dict[str, str]:
    """
    Validate required environment variables.

    Returns:
        Dict with required env vars

    Raises:
        ConfigurationError: Missing required environment variable
    """
    env_config = {}
    missing = []

    for var, names in REQUIRED_VARS.items():
        value = next((os.getenv(name) for name in names if os.getenv(name)), None)
        if not value:
            missing.append(var)
        else:
            env_config[var] = value

    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}",
            missing=missing,
        )

    logger.debug("validate_environment - Environment validated")
    return env_config
