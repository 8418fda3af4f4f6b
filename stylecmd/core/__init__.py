"""
Core contracts and collaborators for the style command interpreter.

- contracts: intents, targets, contexts, results
- color: HSL token encoding helpers
- token_store: TokenStore protocol + in-memory implementation
"""

from .contracts import (
    IntentType,
    Delta,
    Scope,
    ResolvedScope,
    TargetCategory,
    SelectionKind,
    ThemeMode,
    ErrorKind,
    ParsedIntent,
    FuzzyMatch,
    TargetDefinition,
    SelectionContext,
    ResolvedContext,
    TokenChange,
    RelativeResult,
    ExecutionResult,
)
from .token_store import TokenStore, InMemoryTokenStore
