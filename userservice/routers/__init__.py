"""
FastAPI routers for the user service.

Each module exposes an APIRouter that create_app() includes; endpoints only
translate HTTP to UserService calls and domain errors to status codes.
"""
