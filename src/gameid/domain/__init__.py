"""Domain layer — format registry, normalizers, validator, catalog rules.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""
