"""
stylecmd - Natural-Language Style Command Interpreter

Turns free-text utterances such as "make the background blue",
"tone it down", "more rounded" or "dark mode" into deterministic
mutations of a small named set of design tokens.

Top Priorities (strict order):
1. Deterministic, explainable behavior
2. Tolerance for typos, synonyms and casual phrasing
3. Never failing loudly on user input ("I didn't understand that")
4. Keeping the token store the single source of truth
"""

__version__ = "0.1.0"
__author__ = "stylecmd Team"
