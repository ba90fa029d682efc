"""
Simple merchant usage example (server-side). The shop starts a payment, sends
the buyer to the returned action URL and reconciles the payment when the buyer
comes back with a ``payload`` query parameter.
"""
import os
from decimal import Decimal

from adyen_pay import AdyenConfig, AdyenGateway, Customer, Money, Payment


def run():
    os.environ.setdefault("ADYEN_API_KEY", "")  # set your test key in env
    os.environ.setdefault("ADYEN_MERCHANT_ACCOUNT", "")
    gateway = AdyenGateway(AdyenConfig.from_env())

    print("Issuers:", gateway.get_issuers())

    payment = Payment(
        id="1001",
        total_amount=Money(value=Decimal("10.00"), currency="EUR"),
        return_url="https://shop.example.com/return/1001",
        method="ideal",
        issuer="1121",
        customer=Customer(locale="nl_NL"),
    )
    patch = gateway.start(payment)
    payment = patch.apply(payment)
    print("Redirect buyer to:", payment.action_url)

    # Later, on return: payload = request.query_params["payload"]
    payload = input("payload: ")
    payment = gateway.update_status(payment, payload).apply(payment)
    print("Status:", payment.status.value)


if __name__ == "__main__":
    run()
