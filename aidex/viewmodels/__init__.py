"""ViewModel package for UI state and command surfaces.

Call context:
    ``aidex/web_ui/main.py`` builds one view-model per page visit and binds
    its refreshable sections to the ``on_changed`` callback.

Dependencies:
    Modules in this package depend on domain types and use cases only. I/O
    adapters are injected as ``DirectoryPort`` implementations.

Responsibilities:
    - Own the (loading, error, data) state of a view.
    - Run blocking port calls off the event loop.
    - Transform typed domain records into view-facing rows.
"""
