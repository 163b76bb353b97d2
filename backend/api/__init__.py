"""
HTTP layer: routers and resource handlers.
"""
