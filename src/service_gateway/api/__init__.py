"""
service_gateway.api

API package for the Service Gateway.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and request models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: shape validation + delegation to services.
