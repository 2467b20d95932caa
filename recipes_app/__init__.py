"""In-memory recipe CRUD service: FastAPI app factory, store, routes and an embeddable server."""
