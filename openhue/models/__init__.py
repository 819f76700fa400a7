"""Data types and utility functions.

This package contains:
- types: TypedDict definitions for bridge API payloads
- utils: Helpers (similarity_score, mask_key)
"""
