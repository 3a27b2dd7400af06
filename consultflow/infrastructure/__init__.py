"""Infrastructure adapters for ConsultFlow."""
