import logging
from typing import Optional, Dict, List

from .. import payment_method_type
from ..checkout import (
    CheckoutConfig,
    CheckoutPage,
    ConfigObject,
    RESULT_PATH,
    get_context,
    script_url,
)
from ..client import AdyenClient
from ..config import AdyenConfig
from ..errors import AdyenError
from ..host import CoreMethod, LocaleProvider, Payment, PaymentPatch, SiteUrls
from ..models import Integration, PaymentResultRequest
from ..reconciler import (
    META_PAYMENT_SESSION,
    META_SDK_VERSION,
    PaymentState,
    ResultReconciler,
    get_state,
)
from ..request_builder import RequestBuilder
from .base import GatewayBase

logger = logging.getLogger(__name__)


class AdyenGateway(GatewayBase):
    """
    Adyen gateway supporting two integrations:

    - API integration (iDEAL, SOFORT): the server creates the payment with the
      ``payments`` endpoint and the buyer is redirected to Adyen.
    - Session integration (everything else): the server creates a payment
      session and the checkout SDK renders the payment form in the browser.

    In both cases the buyer returns with a ``payload`` that is decoded with
    the ``payments/result`` endpoint.
    """

    slug = "adyen"

    def __init__(
        self,
        config: AdyenConfig,
        client: Optional[AdyenClient] = None,
        locale_provider: Optional[LocaleProvider] = None,
        site_urls: Optional[SiteUrls] = None,
    ):
        self.config = config
        self.client = client or AdyenClient(config)
        self.builder = RequestBuilder(config, locale_provider=locale_provider, site_urls=site_urls)
        self.site_urls = self.builder.site_urls
        self.reconciler = ResultReconciler()

    @staticmethod
    def _log_state(payment: Payment, state: PaymentState, integration: Optional[Integration] = None) -> None:
        suffix = f" ({integration.value})" if integration is not None else ""
        logger.debug(f"Payment {payment.id}: {state.value}{suffix}")

    def get_supported_payment_methods(self) -> List[str]:
        return [method.value for method in CoreMethod]

    def start(self, payment: Payment) -> PaymentPatch:
        request = self.builder.build(payment)
        self._log_state(payment, PaymentState.REQUEST_BUILT)

        if request.integration == Integration.API:
            self._log_state(payment, PaymentState.SUBMITTED, request.integration)
            response = self.client.create_payment(request)
            self._log_state(payment, PaymentState.REDIRECT_PENDING)
            return self.reconciler.payment_started(payment, response)

        self._log_state(payment, PaymentState.SUBMITTED, request.integration)
        response = self.client.create_payment_session(request)
        self._log_state(payment, PaymentState.SESSION_PENDING)
        return self.reconciler.session_started(payment, response, request.sdk_version)

    def payment_redirect(self, payment: Payment) -> Optional[CheckoutPage]:
        sdk_version = payment.meta.get(META_SDK_VERSION)
        payment_session = payment.meta.get(META_PAYMENT_SESSION)

        if not sdk_version or not payment_session:
            return None

        return CheckoutPage(
            script_url=script_url(self.config.mode, sdk_version),
            config=CheckoutConfig(
                payments_result_url=self.site_urls.rest_url(RESULT_PATH),
                payment_return_url=payment.return_url,
                payment_session=payment_session,
                config_object=ConfigObject(context=get_context(self.config.mode)),
            ),
        )

    def update_status(self, payment: Payment, payload: Optional[str]) -> PaymentPatch:
        if not payload:
            return PaymentPatch()

        if get_state(payment) == PaymentState.RECONCILED:
            logger.info(f"Payment {payment.id} is already {payment.status.value}, ignoring return payload")
            return PaymentPatch()

        try:
            result = self.client.get_payment_result(PaymentResultRequest(payload=payload))
        except AdyenError as e:
            logger.error(f"Error getting payment result for payment {payment.id}: {e}")
            return PaymentPatch(notes=[f"Error getting payment result: {e}"])

        return self.reconciler.update_payment(payment, result)

    def get_available_payment_methods(self) -> List[str]:
        methods: List[str] = []
        for payment_method in self.client.get_payment_methods():
            core_method = payment_method_type.to_core(payment_method.type)
            if core_method is not None and core_method not in methods:
                methods.append(core_method)
        return methods

    def get_issuers(self) -> List[Dict[str, Dict[str, str]]]:
        issuers: Dict[str, str] = {}

        for payment_method in self.client.get_payment_methods():
            if payment_method.type != payment_method_type.IDEAL:
                continue
            for detail in payment_method.details or []:
                if detail.key == "issuer" and detail.type == "select":
                    for item in detail.items or []:
                        issuers[item.id] = item.name

        if not issuers:
            return []

        return [{"options": issuers}]
