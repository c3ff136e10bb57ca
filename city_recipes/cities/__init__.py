"""
City snapshot and recipe operations.

Responsibilities:
- Check city existence against the upstream insights API.
- Compose insights, weather and stored recipes into a city snapshot.
- Create and delete recipes for an existing city.
- Report expected failures as ``ErrorKind`` values instead of raising.
"""
