"""Packaged reference data for the supported airframes."""
