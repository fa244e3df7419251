"""
service_gateway.backend_clients

Backend client package.

Responsibilities:
- Provide the outbound HTTP boundary to real backend services.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The dispatcher depends on this boundary, not on httpx directly.
