"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports: the HTTP request
    resolver, the per-resource REST adapters, configuration providers and
    token storage.

Dependencies:
    Individual submodules depend on ``requests``, filesystem APIs, and domain
    protocol definitions.

Call context:
    Imported by the composition root in ``nursery.app.main`` and by tests.
"""
