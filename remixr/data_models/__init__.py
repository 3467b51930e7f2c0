"""
remixr/data_models/__init__.py

Pydantic models for snapshots, structural trees, framework detection, scores and reports.
"""
