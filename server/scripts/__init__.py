"""Maintenance scripts for blog data."""
