"""Core (UI-agnostic) dashboard logic.

This package contains:
- settings and logging setup
- dataset loading (CSV -> typed pandas frame, cached once per process)
- aggregation functions (JSON-serializable chart records)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
