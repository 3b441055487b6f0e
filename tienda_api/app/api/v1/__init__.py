"""
Version 1 of the API.

This subpackage bundles the endpoints of the first public version of
the Tienda API.  Breaking changes should go into a new version
subpackage.
"""
