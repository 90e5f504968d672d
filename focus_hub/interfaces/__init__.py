"""Abstract interfaces for infrastructure the services depend on."""
