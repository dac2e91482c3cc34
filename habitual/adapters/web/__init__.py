"""Web adapter: FastAPI app and routers."""
