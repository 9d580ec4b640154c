"""
jsondiffer version constants.
"""

# Library version (matches pyproject.toml)
JSONDIFFER_VERSION = "0.3.0"
