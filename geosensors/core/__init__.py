"""Low-level numeric helpers: shape coercion and the matrix byte codec."""
