from abc import ABC, abstractmethod
from typing import Optional, Dict, List

from ..checkout import CheckoutPage
from ..host import Payment, PaymentPatch


class GatewayBase(ABC):
    """
    Host-facing gateway interface. Implementations never mutate the payment
    they receive; they return a PaymentPatch for the host to apply.
    """

    @abstractmethod
    def start(self, payment: Payment) -> PaymentPatch:
        """
        Start a payment at the provider. Raises an AdyenError subclass on
        failure, in which case the payment must be left as it was.
        """
        raise NotImplementedError

    @abstractmethod
    def update_status(self, payment: Payment, payload: Optional[str]) -> PaymentPatch:
        """
        Reconcile the payment with the result payload the buyer returned with.
        """
        raise NotImplementedError

    @abstractmethod
    def get_supported_payment_methods(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def get_available_payment_methods(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def get_issuers(self) -> List[Dict[str, Dict[str, str]]]:
        raise NotImplementedError

    def payment_redirect(self, payment: Payment) -> Optional[CheckoutPage]:
        """
        Checkout page data for payments rendered in the browser; None when
        the payment is completed elsewhere.
        """
        return None
