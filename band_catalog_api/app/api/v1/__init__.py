"""
Version 1 of the API.

This subpackage bundles the band and song endpoints.  Breaking changes
should be introduced in a new version subpackage.
"""
