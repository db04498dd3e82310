"""
Version constants for the block zapping engine.

A CleanReport records the taxonomy version so that a report can always be traced
back to the category table that produced it.
"""

# Package version
ENGINE_VERSION = "0.1.0"

# Attribute category table version (bump whenever a key moves between categories)
TAXONOMY_VERSION = "block-attributes-1.0.0"
