"""ViewModel package for UI state and command surfaces.

Call context:
    ``minitools/app/main.py`` and ``minitools/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to session events.

Dependencies:
    Modules in this package depend on domain types only. The runtime, I/O
    adapters and use-case orchestration remain outside.

Responsibilities:
    - Expose command intent callbacks that submit session events.
    - Transform session snapshots into view-facing DTOs.
    - Keep MVVM boundaries explicit by avoiding widget or persistence logic.
"""
