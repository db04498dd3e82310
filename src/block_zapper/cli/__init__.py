"""
CLI module for block zapping.

Provides a command-line tool for cleaning JSON block forests.
"""

from block_zapper.cli.zap import main as zap_main

__all__ = ["zap_main"]
