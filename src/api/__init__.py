"""
FastAPI routers for the crag sun exposure service
"""
