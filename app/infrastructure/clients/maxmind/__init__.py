"""MaxMind GeoIP2 client for infrastructure layer.

Public API (Package Level):
- MaxMindClient: Client for GeoIP2 database operations
- CountryData: Dataclass for country lookup results

Usage:
    from infrastructure.clients.maxmind import MaxMindClient

    client = MaxMindClient(settings=settings)
    result = client.country(ip_address="8.8.8.8")
    if result.is_success:
        iso_code = result.data.iso_code
"""

from infrastructure.clients.maxmind.client import CountryData, MaxMindClient

__all__ = [
    "MaxMindClient",
    "CountryData",
]
