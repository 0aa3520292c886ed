"""
Run Package

This package holds the configuration of an evonet run.

Exported Classes:
    Config: Configuration parameters parsed from an INI file (or defaults)
"""

from evonet.run.config import Config

__all__ = ['Config']
