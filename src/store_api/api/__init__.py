"""HTTP surface of the store: FastAPI application and versioned routers."""
