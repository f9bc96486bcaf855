# Routes package init
"""
Vehicle API - API Routes Package
=================================

Route Inventory:
    - vehicles.py:  GET    /api/vehicles        (index)
                    GET    /api/vehicles/{id}   (show)
                    POST   /api/vehicles        (create)
                    PUT    /api/vehicles/{id}   (update)
                    DELETE /api/vehicles/{id}   (destroy)
    - health.py:    GET    /health              (service health check)

Routes stay thin: extract request data, call the service, pick the status
code. Everything else lives in services.
"""
