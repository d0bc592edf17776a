"""Reusable patterns for building catalog verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: repository layers and domain configuration.
"""
