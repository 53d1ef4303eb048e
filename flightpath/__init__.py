"""Nearby-flight tracker: polls ADS-B providers and serves approach geometry."""
