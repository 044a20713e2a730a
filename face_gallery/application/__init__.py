"""Application layer: services, DTOs and use cases."""
