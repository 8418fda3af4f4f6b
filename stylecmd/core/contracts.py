"""
Core data contracts for the style command interpreter.

All components must adhere to these contracts for:
- Type safety
- Deterministic behavior
- Explainability (every result says what was changed and why)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


# ============================================================
# ENUMERATIONS
# ============================================================

class IntentType(Enum):
    """Classification of a single command."""
    STYLE = "style"
    VISIBILITY = "visibility"
    LAYOUT = "layout"
    MODE = "mode"
    PRESET = "preset"
    UNDO = "undo"
    REDO = "redo"
    UNKNOWN = "unknown"


class Delta(Enum):
    """Direction of a relative change."""
    MORE = "more"
    LESS = "less"

    @property
    def sign(self) -> int:
        return 1 if self is Delta.MORE else -1

    def inverted(self) -> Delta:
        return Delta.LESS if self is Delta.MORE else Delta.MORE


class Scope(Enum):
    """Scope requested by the command text."""
    GLOBAL = "global"
    SELECTED = "selected"


class ResolvedScope(Enum):
    """Scope a resolved token change applies to."""
    GLOBAL = "global"
    COMPONENT = "component"
    ELEMENT = "element"


class TargetCategory(Enum):
    """Category of a design token."""
    COLOR = "color"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    LAYOUT = "layout"
    MODE = "mode"


class SelectionKind(Enum):
    """Closed set of selection shapes the resolver dispatches on."""
    NONE = "none"
    PAGE = "page"
    COMPONENT = "component"
    OTHER = "other"


class ThemeMode(Enum):
    """Light/dark theme mode held by the token store."""
    LIGHT = "light"
    DARK = "dark"


class ErrorKind(Enum):
    """Structured error classes for programmatic handling."""
    UNPARSEABLE_COMMAND = "unparseable_command"
    UNKNOWN_TARGET = "unknown_target"
    UNKNOWN_VALUE = "unknown_value"
    UNRESOLVABLE_RELATIVE = "unresolvable_relative"
    UNKNOWN_PRESET = "unknown_preset"


# Contextual marker used by commands like "make it blue"
CONTEXTUAL_TARGET = "this"


# ============================================================
# PARSING
# ============================================================

@dataclass(frozen=True)
class ParsedIntent:
    """
    Structured result of classifying one command string.

    Immutable once produced by the parser.
    """
    type: IntentType
    raw: str
    confidence: float = 0.0
    target: Optional[str] = None
    value: Optional[str] = None
    delta: Optional[Delta] = None
    scope: Optional[Scope] = None

    @property
    def is_contextual(self) -> bool:
        """True when the command refers to the current selection."""
        return self.target == CONTEXTUAL_TARGET or self.scope == Scope.SELECTED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "target": self.target,
            "value": self.value,
            "delta": self.delta.value if self.delta else None,
            "scope": self.scope.value if self.scope else None,
            "raw": self.raw,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class FuzzyMatch:
    """A single approximate string match."""
    candidate: str
    score: float
    exact: bool = False
    phonetic: bool = False


# ============================================================
# TARGETS AND CONTEXT
# ============================================================

@dataclass(frozen=True)
class TargetDefinition:
    """Static description of a canonical target."""
    token_id: str
    persistence_path: str
    description: str
    category: TargetCategory
    paired_foreground_token_id: Optional[str] = None


@dataclass(frozen=True)
class SelectionContext:
    """
    External, read-only description of what the user has selected.

    kind is one of: page, component, dataModel, flow (or None).
    """
    kind: Optional[str] = None
    id: Optional[str] = None
    component_kind: Optional[str] = None
    name: Optional[str] = None

    def classify(self) -> SelectionKind:
        """Collapse the loose descriptor into the closed SelectionKind union."""
        if not self.id:
            return SelectionKind.NONE
        if self.kind == "page":
            return SelectionKind.PAGE
        if self.kind == "component" and self.component_kind:
            return SelectionKind.COMPONENT
        return SelectionKind.OTHER


def classify_selection(selection: Optional[SelectionContext]) -> SelectionKind:
    """Classify an optional selection; a missing selection is NONE."""
    if selection is None:
        return SelectionKind.NONE
    return selection.classify()


@dataclass
class ResolvedContext:
    """Concrete token binding for a style command."""
    success: bool
    scope: ResolvedScope = ResolvedScope.GLOBAL
    token_id: Optional[str] = None
    paired_foreground_token_id: Optional[str] = None
    persistence_path: Optional[str] = None
    category: Optional[TargetCategory] = None
    component_id: Optional[str] = None
    interpretation: Optional[str] = None
    error: Optional[str] = None


# ============================================================
# RESULTS
# ============================================================

@dataclass(frozen=True)
class TokenChange:
    """One token mutation performed by a command."""
    token_id: str
    old_value: str
    new_value: str


@dataclass
class RelativeResult:
    """Outcome of a "more/less" computation."""
    success: bool
    new_value: Optional[str] = None
    property: Optional[str] = None
    error: Optional[str] = None

    # Token the property lives in when it is not the bound token (e.g. radius)
    token_id: Optional[str] = None

    # Scale position for discrete scales
    step: Optional[str] = None


@dataclass
class ExecutionResult:
    """
    Result of executing one command.

    Produced fresh per command; the caller owns its lifetime.
    """
    success: bool
    message: str
    changes: List[TokenChange] = field(default_factory=list)
    error: Optional[str] = None
    interpretation: Optional[str] = None
    intent_type: Optional[IntentType] = None
    error_kind: Optional[ErrorKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "changes": [
                {"tokenId": c.token_id, "oldValue": c.old_value, "newValue": c.new_value}
                for c in self.changes
            ],
            "error": self.error,
            "interpretation": self.interpretation,
            "intentType": self.intent_type.value if self.intent_type else None,
            "errorKind": self.error_kind.value if self.error_kind else None,
        }
