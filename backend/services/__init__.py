"""
Service layer: business operations behind the API.
"""
