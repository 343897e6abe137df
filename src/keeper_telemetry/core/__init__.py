"""Core domain: models, ports, conversions and samplers."""
