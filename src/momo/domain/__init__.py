"""Domain shapes and errors for mobile-money pre-flight validation.

This package should not depend on application code.
"""

from .entities import (
    SANDBOX,
    Environment,
    GlobalConfig,
    Party,
    PartyIdType,
    PaymentRequest,
    ProductConfig,
    SubscriptionConfig,
    UserConfig,
)
from .errors import ConfigurationError, ValidationError

__all__ = [
    "SANDBOX",
    "Environment",
    "GlobalConfig",
    "Party",
    "PartyIdType",
    "PaymentRequest",
    "ProductConfig",
    "SubscriptionConfig",
    "UserConfig",
    "ConfigurationError",
    "ValidationError",
]
