"""
remixr/utils/__init__.py
"""
