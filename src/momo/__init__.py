"""Pre-flight validation for mobile-money payment clients."""

from momo.application import (
    check_request_to_pay,
    validate_client_configs,
    validate_global_config,
    validate_product_config,
    validate_request_to_pay,
    validate_subscription_config,
    validate_user_config,
)
from momo.domain import ConfigurationError, ValidationError

__all__ = [
    "check_request_to_pay",
    "validate_client_configs",
    "validate_global_config",
    "validate_product_config",
    "validate_request_to_pay",
    "validate_subscription_config",
    "validate_user_config",
    "ConfigurationError",
    "ValidationError",
]
