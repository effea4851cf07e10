"""In-memory record store layer.

This package owns record storage, schema inference, read-only
iteration, column views and subset/merge derivations.
"""
