"""HTTP API for the route compiler."""
