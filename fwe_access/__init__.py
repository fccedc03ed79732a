# =======================================================================================
# fwe_access/__init__.py - Package Initialization
# =======================================================================================
"""
FWE Access Control - Terminal Check-in Service

Decides, for each ticket scanned at a venue terminal, whether the holder is let
through, and keeps an append-only record of every decision.
"""

__version__ = "1.0.0"
__author__ = "FWE Team"
