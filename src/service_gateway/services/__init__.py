"""
service_gateway.services

Service layer package.

Responsibilities:
- Dispatch logic and response envelope construction.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers call into this layer; it never imports FastAPI.
