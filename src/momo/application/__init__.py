from .config_validators import (
    validate_client_configs,
    validate_global_config,
    validate_product_config,
    validate_subscription_config,
    validate_user_config,
)
from .request_validators import check_request_to_pay, validate_request_to_pay

__all__ = [
    "validate_client_configs",
    "validate_global_config",
    "validate_product_config",
    "validate_subscription_config",
    "validate_user_config",
    "check_request_to_pay",
    "validate_request_to_pay",
]
