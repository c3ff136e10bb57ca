"""
Upstream city data integration.

Responsibilities:
- Manage the upstream base URL and API key.
- Fetch city insights and weather predictions for a city identifier.
- Report an unknown city as ``None`` instead of raising.
"""
