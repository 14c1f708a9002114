"""HTTP API: application, routers and dependencies."""
