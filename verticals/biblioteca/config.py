"""Biblioteca vertical configuration.

Re-exports the BibliotecaConfig from the patterns module. Values come from
BIBLIOTECA_* environment variables when set, otherwise the fixed defaults.
"""

from patterns.domain_config import BibliotecaConfig

# Process configuration instance
config = BibliotecaConfig.from_env()
