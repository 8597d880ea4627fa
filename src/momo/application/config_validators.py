"""Pure validation functions for client configuration.

Each function checks its rules in a fixed order and raises on the first
one that fails. Presence of every required field is checked before the
format of any field.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from momo.application.formats import is_present, is_uuid_v4
from momo.domain.entities import (
    SANDBOX,
    GlobalConfig,
    ProductConfig,
    SubscriptionConfig,
    UserConfig,
)
from momo.domain.errors import ValidationError

logger = logging.getLogger(__name__)


def _reject(shape: str, message: str) -> ValidationError:
    logger.debug("Rejected %s config: %s", shape, message)
    return ValidationError(message)


def validate_global_config(
    config: Union[GlobalConfig, Mapping[str, Any], None],
) -> None:
    """Validate the settings shared by all products.

    ``baseUrl`` is only required when an environment other than sandbox
    is selected.

    Raises:
        ValidationError: If callbackHost is missing, or baseUrl is missing
            for a non-sandbox environment.
    """
    cfg = GlobalConfig.coerce(config)
    if not is_present(cfg.callback_host):
        raise _reject("global", "callbackHost is required")
    if is_present(cfg.environment) and cfg.environment != SANDBOX:
        if not is_present(cfg.base_url):
            raise _reject(
                "global", "baseUrl is required if environment is not sandbox"
            )


def validate_product_config(
    config: Union[ProductConfig, Mapping[str, Any], None],
) -> None:
    """Validate the credentials of a single product.

    Raises:
        ValidationError: If primaryKey, userId or userSecret is missing,
            or userId is not a UUID v4.
    """
    cfg = ProductConfig.coerce(config)
    if not is_present(cfg.primary_key):
        raise _reject("product", "primaryKey is required")
    if not is_present(cfg.user_id):
        raise _reject("product", "userId is required")
    if not is_present(cfg.user_secret):
        raise _reject("product", "userSecret is required")
    if not is_uuid_v4(cfg.user_id):
        raise _reject("product", "userId must be a valid uuid v4")


def validate_subscription_config(
    config: Union[SubscriptionConfig, Mapping[str, Any], None],
) -> None:
    """Validate that a subscription primary key is set."""
    cfg = SubscriptionConfig.coerce(config)
    if not is_present(cfg.primary_key):
        raise _reject("subscription", "primaryKey is required")


def validate_user_config(
    config: Union[UserConfig, Mapping[str, Any], None],
) -> None:
    """Validate API user credentials.

    Raises:
        ValidationError: If userId or userSecret is missing, or userId is
            not a UUID v4.
    """
    cfg = UserConfig.coerce(config)
    if not is_present(cfg.user_id):
        raise _reject("user", "userId is required")
    if not is_present(cfg.user_secret):
        raise _reject("user", "userSecret is required")
    if not is_uuid_v4(cfg.user_id):
        raise _reject("user", "userId must be a valid uuid v4")


def validate_client_configs(
    global_config: Union[GlobalConfig, Mapping[str, Any], None],
    product_config: Optional[Union[ProductConfig, Mapping[str, Any]]] = None,
) -> None:
    """Run the construction-time checks of a payment client.

    The global config is checked first, then the product config if given.
    """
    validate_global_config(global_config)
    if product_config is not None:
        validate_product_config(product_config)
