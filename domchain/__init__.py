"""
domchain - build element trees by chaining calls or by parsing compact markup.
"""

from domchain.utils.logging import setup_logging

# Set up basic logging
logger = setup_logging()

# Package information
__version__ = "1.0.0"
__author__ = "domchain developers"
__description__ = "Chainable element trees and a compact markup parser"

from domchain.exceptions import DomChainError, MarkupError, UnbalancedBraces, TreeError
from domchain.page import Page
from domchain.parser import MarkupParser, build_tree, validate
from domchain.registry import LookupRegistry

__all__ = [
    'Page', 'LookupRegistry', 'MarkupParser', 'build_tree', 'validate',
    'DomChainError', 'MarkupError', 'UnbalancedBraces', 'TreeError',
]

logger.debug(f"domchain v{__version__} initialized")
