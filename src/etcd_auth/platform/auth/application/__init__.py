"""Auth application layer: operation table, future bridge and client."""
