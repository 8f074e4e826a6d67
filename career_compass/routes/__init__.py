"""
FastAPI routers for all API endpoints.

- health: GET /health
- guidance: POST /api/guidance (recommendations and details actions)
"""
