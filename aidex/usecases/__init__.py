"""Use-case layer for the directory views.

Each module coordinates domain records and ``DirectoryPort`` calls without
performing transport I/O directly, preserving MVVM + Hexagonal boundaries.
"""
