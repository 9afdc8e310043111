"""Runtime settings for the wholesale domain."""

import os
from decimal import Decimal

from protean.utils.globals import current_domain

DEFAULT_PLATFORM_MIN_ORDER_VALUE = Decimal("2000")


def platform_minimum_order_value() -> Decimal:
    """Return the platform-wide order minimum.

    The process environment (``PLATFORM_MIN_ORDER_VALUE``) takes precedence
    over the ``[custom]`` table of the active domain configuration.
    """
    raw = os.environ.get("PLATFORM_MIN_ORDER_VALUE")
    if raw is None and current_domain:
        raw = (current_domain.config.get("custom") or {}).get("PLATFORM_MIN_ORDER_VALUE")
    if raw is None or str(raw).strip() == "":
        return DEFAULT_PLATFORM_MIN_ORDER_VALUE
    return Decimal(str(raw))
