"""FastAPI routes and endpoints.

Endpoints:
- GET /health: Service health status
- GET /ready: Readiness probe (credential configured)
- GET /v1/tools: Registered tools
- POST /v1/tools/{name}: Tool invocation
"""
