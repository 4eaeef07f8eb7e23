"""HTTP API for Missive.

The API is the execution environment around the CRUD engine: it resolves
callers from bearer tokens, serializes calls into the engine, persists
snapshots, and maps errors to HTTP responses.
"""
