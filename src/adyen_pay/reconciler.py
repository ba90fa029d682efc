"""Map Adyen responses back onto host payments."""

import enum
import logging
from typing import Optional

from .host import Payment, PaymentPatch, PaymentStatus, TERMINAL_STATUSES
from .models import (
    PaymentResponse,
    PaymentResultResponse,
    PaymentSessionResponse,
    ResultCode,
)

logger = logging.getLogger(__name__)

META_SDK_VERSION = "sdkVersion"
META_PAYMENT_SESSION = "paymentSessionToken"


class PaymentState(str, enum.Enum):
    """Where a payment is in its trip through the adapter."""
    CREATED = "created"
    REQUEST_BUILT = "request_built"
    SUBMITTED = "submitted"
    REDIRECT_PENDING = "redirect_pending"
    SESSION_PENDING = "session_pending"
    RECONCILED = "reconciled"


RESULT_CODE_STATUS = {
    ResultCode.AUTHORISED.value: PaymentStatus.AUTHORIZED,
    ResultCode.CANCELLED.value: PaymentStatus.CANCELLED,
    ResultCode.ERROR.value: PaymentStatus.ERROR,
    ResultCode.PENDING.value: PaymentStatus.PENDING,
    ResultCode.RECEIVED.value: PaymentStatus.PENDING,
    ResultCode.REDIRECT_SHOPPER.value: PaymentStatus.PENDING,
    ResultCode.REFUSED.value: PaymentStatus.REFUSED,
}


def map_result_code(result_code: Optional[str]) -> PaymentStatus:
    """Map an Adyen result code to a host status; unknown codes stay pending."""
    status = RESULT_CODE_STATUS.get(result_code or "")
    if status is None:
        logger.warning(f"Unknown Adyen result code '{result_code}', keeping payment pending")
        return PaymentStatus.PENDING
    return status


def get_state(payment: Payment) -> PaymentState:
    """Derive the adapter state of a payment from what the host stored."""
    if payment.status in TERMINAL_STATUSES:
        return PaymentState.RECONCILED
    if payment.meta.get(META_PAYMENT_SESSION):
        return PaymentState.SESSION_PENDING
    if payment.transaction_id:
        return PaymentState.REDIRECT_PENDING
    return PaymentState.CREATED


class ResultReconciler:
    """Turns Adyen responses into ``PaymentPatch``es."""

    def payment_started(self, payment: Payment, response: PaymentResponse) -> PaymentPatch:
        """Outcome of a ``payments`` call (API integration)."""
        patch = PaymentPatch(transaction_id=response.psp_reference)
        if response.redirect is not None:
            patch.action_url = response.redirect.url
        logger.info(
            f"Payment {payment.id} created at Adyen with PSP reference {response.psp_reference}"
        )
        return patch

    def session_started(
        self,
        payment: Payment,
        response: PaymentSessionResponse,
        sdk_version: str,
    ) -> PaymentPatch:
        """Outcome of a ``paymentSession`` call (session integration).

        The PSP reference is only known once the buyer returns.
        """
        patch = PaymentPatch(
            meta={
                META_SDK_VERSION: sdk_version,
                META_PAYMENT_SESSION: response.payment_session,
            },
        )
        if payment.pay_redirect_url:
            patch.action_url = payment.pay_redirect_url
        logger.info(f"Payment session created for payment {payment.id}")
        return patch

    def update_payment(self, payment: Payment, result: PaymentResultResponse) -> PaymentPatch:
        """Reconcile a decoded return payload with the payment."""
        if payment.status in TERMINAL_STATUSES:
            logger.warning(
                f"Ignoring result '{result.result_code}' for payment {payment.id}, "
                f"already {payment.status.value}"
            )
            return PaymentPatch()

        patch = PaymentPatch(status=map_result_code(result.result_code))

        if result.psp_reference:
            patch.transaction_id = result.psp_reference

        if result.merchant_reference is not None and result.merchant_reference != str(payment.id):
            logger.warning(
                f"Merchant reference {result.merchant_reference} does not match payment {payment.id}"
            )
            patch.notes.append(
                f"Adyen merchant reference '{result.merchant_reference}' does not match this payment."
            )

        logger.info(
            f"Payment {payment.id} reconciled: {result.result_code} -> {patch.status.value}"
        )
        return patch
