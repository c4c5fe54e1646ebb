"""
String analysis and profile microservices with a remote deployment helper.
Subpackages group the pure analysis core, the in-memory store, the FastAPI surface, and deployment tooling.
"""

__version__ = "0.1.0"
