"""Bundled word corpora and EFF wordlists (data only)."""
