"""Equity input parsing, validation and normalization."""
