"""
FastAPI REST Endpoints
======================

REST API endpoints for HTTP access to slide rendering.

Endpoints:
- GET /health: Status and available layout styles
- POST /render-slide: Render one slide to PNG
- POST /render-carousel: Render an ordered list of slides to PNG
"""
