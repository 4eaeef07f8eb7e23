"""Missive: single-record-per-identity message store with audit ledgers."""

__version__ = "0.1.0"
