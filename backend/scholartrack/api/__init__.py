"""HTTP API — route contract, routers and global error handlers."""
