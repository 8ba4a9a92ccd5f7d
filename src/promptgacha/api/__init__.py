"""REST API for Prompt Gacha.

Exposes notation preview and batch expansion over HTTP for frontends that
cannot call the Python library directly.
"""
