"""Utility functions for testing.

Provides builders for request contexts and parameter lists used across the
pipeline and handler tests.
"""

from src.application.ajax.context import RequestContext
from src.infrastructure.persistence.in_memory_order_service import DEMO_ORDER_ID


def make_context(command_name: str = "test_command", **parameters: str) -> RequestContext:
    """Build a RequestContext from keyword parameters.

    Args:
        command_name: Command name carried by the context.
        **parameters: Request parameters.

    Returns:
        RequestContext with the given parameters.
    """
    return RequestContext(command_name=command_name, parameters=parameters)


def shipping_address_params(**overrides: str) -> dict[str, str]:
    """Return valid update_shipping_address parameters for the demo order.

    Args:
        **overrides: Parameters to replace.

    Returns:
        Parameter dict.
    """
    params = {
        "orderId": DEMO_ORDER_ID,
        "firstName": "Grace",
        "lastName": "Hopper",
        "addressLine1": "1 Compiler Court",
        "city": "Arlington",
        "postalCode": "22201",
    }
    params.update(overrides)
    return params
