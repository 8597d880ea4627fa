"""Validation of payment requests before they are sent to the gateway."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from momo.application.formats import is_numeric, is_present
from momo.domain.entities import Party, PaymentRequest
from momo.domain.errors import ValidationError

logger = logging.getLogger(__name__)


def _as_party(payer: Any) -> Party:
    # A payer that is not a record carries no party fields.
    if isinstance(payer, (Party, Mapping)):
        return Party.coerce(payer)
    return Party()


def check_request_to_pay(
    request: Union[PaymentRequest, Mapping[str, Any], None],
) -> None:
    """Validate a request to pay synchronously. Pure function.

    Rules are checked in order: amount, amount format, currency, payer,
    payer.partyId, payer.partyIdType.

    Raises:
        ValidationError: On the first rule that fails.
    """
    req = PaymentRequest.coerce(request)
    message = None
    if not is_present(req.amount):
        message = "amount is required"
    elif not is_numeric(req.amount):
        message = "amount must be a number"
    elif not is_present(req.currency):
        message = "currency is required"
    elif not is_present(req.payer):
        message = "payer is required"
    else:
        payer = _as_party(req.payer)
        if not is_present(payer.party_id):
            message = "payer.partyId is required"
        elif not is_present(payer.party_id_type):
            message = "payer.partyIdType is required"

    if message is not None:
        logger.debug("Rejected request to pay: %s", message)
        raise ValidationError(message)


async def validate_request_to_pay(
    request: Union[PaymentRequest, Mapping[str, Any], None],
) -> None:
    """Awaitable form of :func:`check_request_to_pay`.

    Lets the client await all pre-flight checks uniformly. Never suspends.
    """
    check_request_to_pay(request)
