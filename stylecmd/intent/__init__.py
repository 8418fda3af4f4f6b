"""
Intent Module.

Responsibilities:
- Natural language → ParsedIntent (ordered grammar rules)
- Target resolution (synonyms, selection, fuzzy matching)
- Relative value computation (scales, HSL)
- User-facing error and help messages
"""

from .fuzzy_matcher import find_best_match, find_close_matches
from .command_parser import CommandParser, parse_command
from .context_resolver import ContextResolver, resolve_context
from .relative_computer import RelativeValueComputer, compute_relative_change, compute_relative_color
