"""Catalog services.

Services hold all listing/rail shaping logic and are called by routes.
Storage is passed in explicitly (a StorageGateway) so it can be swapped in tests.
"""
