"""
City Recipes API.

Aggregates third-party city insights and weather predictions and keeps an
in-memory store of user-submitted recipes per city.
"""
