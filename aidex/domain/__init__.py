"""Domain types for the company directory.

Modules here hold typed records, filter semantics, view-state transitions and
port protocols. Nothing in this package performs I/O.
"""
