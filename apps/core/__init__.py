"""
Core app for the Kunafa Kingdom POS backend.

Holds branch (Store) reference data, the root and health endpoints and the
JSON error envelope shared by every API view.
"""
