"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations of ``DirectoryPort``: the hosted
    PostgREST endpoint over HTTP and an in-memory directory seeded from a
    JSON fixture.

Dependencies:
    ``requests`` for network I/O, ``json`` for fixtures, and the domain
    records in ``aidex.domain.companies``.

Call context:
    Wired by ``aidex.app.settings.build_directory_port`` at startup and used
    directly by tests for transport-level behavior.
"""
