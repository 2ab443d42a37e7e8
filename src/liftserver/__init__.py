"""HTTP and WebSocket front end for a running LiftBank simulation."""
