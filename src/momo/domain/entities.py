"""Configuration and payment request shapes checked before any gateway call.

Fields hold the raw input values. Requiredness, type and format are decided
by the validators in ``momo.application`` in a fixed order, so a bad field
surfaces with its fixed message rather than as a pydantic error.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from momo.domain.errors import ValidationError

Environment = Literal["sandbox", "production"]
PartyIdType = Literal["MSISDN", "EMAIL", "PARTY_CODE"]

SANDBOX: Environment = "sandbox"

M = TypeVar("M", bound="MomoModel")


class MomoModel(BaseModel):
    """Base model accepting both camelCase wire keys and snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @classmethod
    def coerce(cls: Type[M], value: Union[M, Mapping[str, Any], None]) -> M:
        """Return ``value`` as an instance of this model.

        ``None`` is treated as an empty record. Only a value that is not a
        record at all can fail here; it is re-raised as
        :class:`ValidationError` with the first pydantic error.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(value if value is not None else {})
        except PydanticValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"])
            message = f"{loc}: {first['msg']}" if loc else first["msg"]
            raise ValidationError(message) from e


class GlobalConfig(MomoModel):
    """Settings shared by every product of the client."""

    callback_host: Any = None
    environment: Any = None
    base_url: Any = None


class ProductConfig(MomoModel):
    """Credentials for one product (collections, disbursements, ...)."""

    primary_key: Any = None
    user_id: Any = None
    user_secret: Any = None


class SubscriptionConfig(MomoModel):
    primary_key: Any = None


class UserConfig(MomoModel):
    user_id: Any = None
    user_secret: Any = None


class Party(MomoModel):
    """Account holder on either side of a payment."""

    party_id: Any = None
    party_id_type: Any = None


class PaymentRequest(MomoModel):
    """A request to pay addressed to a payer's mobile-money account.

    ``payer`` is kept as given (a :class:`Party`, a mapping, or anything
    else) and read by the request validator.
    """

    amount: Any = None
    currency: Any = None
    payer: Any = None
    external_id: Any = None
    payer_message: Any = None
    payee_note: Any = None
    callback_url: Any = None
