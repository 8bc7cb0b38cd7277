"""Error codes carried on lookup OperationResults.

Each failure of the lookup pipeline is reported as an OperationResult whose
``error_code`` is one of the constants below; callers branch on the code.

- INVALID_IP_ADDRESS: input absent, empty or not an IP literal
- ADDRESS_NOT_FOUND: valid address with no coverage in the database
- DATABASE_UNAVAILABLE: the database cannot be opened or queried
- CACHE_UNAVAILABLE: cache connect/get/set failure (never surfaced to callers)
- CACHE_DISABLED: cache turned off by configuration (handled like unavailable)
"""

INVALID_IP_ADDRESS = "INVALID_IP_ADDRESS"
ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"
DATABASE_UNAVAILABLE = "DATABASE_UNAVAILABLE"
CACHE_UNAVAILABLE = "CACHE_UNAVAILABLE"
CACHE_DISABLED = "CACHE_DISABLED"

# Response bodies returned to HTTP callers
INVALID_IP_MESSAGE = "Invalid IP address"
UNRESOLVED_IP_MESSAGE = "Unable to determine country for IP"
