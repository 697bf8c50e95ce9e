"""
LiteCoreDB - interactive command shell

Line-oriented REPL that routes input to named commands (single or
multi-word), with typo-tolerant suggestions and a fixed-size data file
header codec.
"""

__version__ = "0.1.0"
__author__ = "LiteCoreDB Contributors"

from litecore.router import Router

__all__ = ["Router", "__version__"]
