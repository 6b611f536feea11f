"""Application constants."""

# Currency monitored by this service
CURRENCY_CODE = "LTC"

# Suffix appended to the uppercased currency code to find its address list
ADDRESS_LIST_SUFFIX = "_ADDRESS_LIST"

# The paying wallet is not resolved when forwarding
WALLET_ADDRESS_PLACEHOLDER = "TBD"

DEFAULT_EXPLORER_BASE_URL = "https://chain.so/api/v2/get_tx_received/LTC"
DEFAULT_BALANCE_BASE_URL = "https://blockchain.info/balance"

# Only this status counts as a delivered webhook call
WEBHOOK_SUCCESS_STATUS = 200

UNKNOWN_STATUS = "unknown"

BALANCE_FAILURE_MESSAGE = "Failed to fetch transaction total"
