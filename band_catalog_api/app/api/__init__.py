"""
API package containing versioned routes.

``deps`` resolves the services used by the routes from the running
application, and version subpackages such as ``v1`` expose a top‑level
``router`` that includes all of their resource endpoints.
"""
