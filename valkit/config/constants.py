"""
Constants used across the validation toolkit.
Pinned so combined messages stay stable for callers that parse them.
"""
from decimal import Decimal

# =============================================================================
# Error combination
# =============================================================================
ERROR_DELIMITER: str = "; "

# =============================================================================
# PostgreSQL money type (64-bit integer scaled by 100)
# =============================================================================
MONEY_MIN: Decimal = Decimal("-92233720368547758.08")
MONEY_MAX: Decimal = Decimal("92233720368547758.07")
MONEY_MAX_DECIMAL_PLACES: int = 2

# =============================================================================
# Failure messages
# =============================================================================
MSG_UNSUPPORTED_TYPE: str = "value type is not supported"
MSG_NOT_A_NUMBER: str = "value is not a valid decimal number"
MSG_OUT_OF_RANGE: str = "value {value} is out of the valid range for money type"
MSG_TOO_MANY_DECIMALS: str = "value has more than two decimal places"
