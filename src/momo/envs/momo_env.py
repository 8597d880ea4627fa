from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from momo.application.config_validators import validate_client_configs
from momo.domain.entities import SANDBOX, GlobalConfig, ProductConfig
from momo.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_COLLECTIONS_VARS = (
    "MOMO_COLLECTIONS_PRIMARY_KEY",
    "MOMO_COLLECTIONS_USER_ID",
    "MOMO_COLLECTIONS_USER_SECRET",
)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    global_config: GlobalConfig
    collections: Optional[ProductConfig] = None


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load client settings from the environment and validate them.

    Raises:
        ConfigurationError: If MOMO_CALLBACK_HOST is not set.
        ValidationError: If the loaded configs break a validation rule.
    """
    env = os.environ if environ is None else environ

    callback_host = env.get("MOMO_CALLBACK_HOST")
    if not callback_host:
        raise ConfigurationError("MOMO_CALLBACK_HOST is required")

    global_config = GlobalConfig(
        callback_host=callback_host,
        environment=env.get("MOMO_ENVIRONMENT") or None,
        base_url=env.get("MOMO_BASE_URL") or None,
    )

    collections = None
    if any(env.get(name) for name in _COLLECTIONS_VARS):
        collections = ProductConfig(
            primary_key=env.get("MOMO_COLLECTIONS_PRIMARY_KEY"),
            user_id=env.get("MOMO_COLLECTIONS_USER_ID"),
            user_secret=env.get("MOMO_COLLECTIONS_USER_SECRET"),
        )

    validate_client_configs(global_config, collections)

    logger.info(
        "Loaded momo settings for environment %s",
        global_config.environment or SANDBOX,
    )
    return Settings(global_config=global_config, collections=collections)
