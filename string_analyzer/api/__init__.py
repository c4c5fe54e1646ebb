"""
FastAPI surface for the strings service and the profile service.
Both apps share configuration, middleware, and error handling from this package.
"""
