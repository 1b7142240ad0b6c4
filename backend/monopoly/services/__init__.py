"""Data access for players and games.

Route handlers call exactly one function from this package per request.
Lookups return ``None`` when nothing matched so the HTTP layer can answer
404 without catching anything; every other failure propagates.
"""
