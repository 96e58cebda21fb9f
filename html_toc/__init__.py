"""
Heading permalinks and table-of-contents generation for rendered HTML fragments.
"""

from .conf import TocConfiguration, get_configuration
from .identifiers import IdentifierAssigner, TocEntry
from .parser import Parser, ParserState
from .slugs import generate_toc_id

__all__ = [
    'IdentifierAssigner',
    'Parser',
    'ParserState',
    'TocConfiguration',
    'TocEntry',
    'generate_toc_id',
    'get_configuration',
]
