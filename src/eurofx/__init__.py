"""
EuroFX - Daily Reference Rate Explorer

Ingests the daily euro foreign exchange reference rates, keeps them in an
in-memory table, converts amounts between any two listed currencies and
builds chronological rate series for charting.
"""

__version__ = "1.0.0"
