"""Security – service-principal tokens and their on-disk cache."""
