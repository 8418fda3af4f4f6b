"""
Context Resolution System.

Resolves the target of a style command to a concrete design token using:
- The current selection ("make it blue" with a card selected)
- Synonym tables ("bg", "brand color", "corners")
- Fuzzy matching for typos ("backgorund", "buttns")
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from loguru import logger

from stylecmd.core.contracts import (
    ParsedIntent,
    ResolvedContext,
    ResolvedScope,
    SelectionContext,
    SelectionKind,
    TargetCategory,
    TargetDefinition,
    classify_selection,
)
from stylecmd.intent import synonyms
from stylecmd.intent.error_messages import unknown_target_error
from stylecmd.intent.fuzzy_matcher import find_best_match, normalize_for_comparison


# ============================================================
# TARGET DEFINITIONS
# ============================================================

def _color(token_id: str, path: str, description: str, foreground: Optional[str] = None) -> TargetDefinition:
    return TargetDefinition(
        token_id=token_id,
        persistence_path=path,
        description=description,
        category=TargetCategory.COLOR,
        paired_foreground_token_id=foreground,
    )


TARGET_DEFINITIONS: Mapping[str, TargetDefinition] = MappingProxyType({
    # Colors
    'background': _color('background', 'colors.background', 'Page background color'),
    'primary': _color('primary', 'colors.primary', 'Primary/brand color', 'primary-foreground'),
    'secondary': _color('secondary', 'colors.secondary', 'Secondary color', 'secondary-foreground'),
    'accent': _color('accent', 'colors.accent', 'Accent color', 'accent-foreground'),
    'text': _color('foreground', 'colors.text', 'Text color'),
    'card': _color('card', 'colors.surface', 'Card/surface color', 'card-foreground'),
    'popover': _color('popover', 'colors.popover', 'Popover/dropdown color', 'popover-foreground'),
    'button': _color('primary', 'colors.primary', 'Button color', 'primary-foreground'),
    'input': _color('input', 'colors.input', 'Input field color'),
    'ring': _color('ring', 'colors.ring', 'Focus ring color'),
    'border': _color('border', 'colors.border', 'Border color'),
    'error': _color('destructive', 'colors.error', 'Error/danger color', 'destructive-foreground'),
    'muted': _color('muted', 'colors.muted', 'Muted/subtle color', 'muted-foreground'),

    # Sidebar
    'sidebar': _color('sidebar-background', 'colors.sidebar', 'Sidebar background', 'sidebar-foreground'),
    'sidebar-primary': _color('sidebar-primary', 'colors.sidebarPrimary', 'Sidebar primary color',
                              'sidebar-primary-foreground'),
    'sidebar-accent': _color('sidebar-accent', 'colors.sidebarAccent', 'Sidebar accent color',
                             'sidebar-accent-foreground'),
    'sidebar-border': _color('sidebar-border', 'colors.sidebarBorder', 'Sidebar border color'),

    # Charts
    'chart': _color('chart-1', 'colors.chart1', 'Chart primary color'),
    'chart-1': _color('chart-1', 'colors.chart1', 'Chart color 1'),
    'chart-2': _color('chart-2', 'colors.chart2', 'Chart color 2'),
    'chart-3': _color('chart-3', 'colors.chart3', 'Chart color 3'),
    'chart-4': _color('chart-4', 'colors.chart4', 'Chart color 4'),
    'chart-5': _color('chart-5', 'colors.chart5', 'Chart color 5'),

    # Scales
    'radius': TargetDefinition('radius', 'spacing.borderRadius', 'Border radius', TargetCategory.SPACING),
    'spacing': TargetDefinition('spacing', 'spacing.scale', 'Spacing between elements', TargetCategory.SPACING),
    'font-size': TargetDefinition('font-size', 'typography.fontSize', 'Base font size',
                                  TargetCategory.TYPOGRAPHY),
    'font-weight': TargetDefinition('font-weight', 'typography.fontWeight', 'Base font weight',
                                    TargetCategory.TYPOGRAPHY),

    # Mode
    'mode': TargetDefinition('mode', 'mode', 'Light/dark mode', TargetCategory.MODE),
})

# Component kind -> tokens it uses; the first one is the one recolored
COMPONENT_TOKENS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'card': ('card', 'card-foreground', 'radius'),
    'button': ('primary', 'primary-foreground', 'radius'),
    'input': ('input', 'border', 'radius'),
    'container': ('background', 'foreground'),
    'text': ('foreground', 'muted-foreground'),
    'heading': ('foreground',),
    'list': ('card', 'border'),
    'table': ('card', 'border', 'muted'),
    'form': ('card', 'input', 'border'),
    'calendar': ('card', 'primary', 'muted'),
    'chart': ('chart-1', 'chart-2', 'chart-3', 'chart-4', 'chart-5'),
    'sidebar': ('sidebar-background', 'sidebar-foreground', 'sidebar-border'),
    'popover': ('popover', 'popover-foreground'),
    'dropdown': ('popover', 'popover-foreground'),
    'modal': ('card', 'card-foreground'),
    'dialog': ('card', 'card-foreground'),
})

DEFAULT_TARGET = 'primary'
PAGE_TARGET = 'background'

# Property name -> tokens that carry it, for component_supports_property
_PROPERTY_TOKENS = {
    'radius': ('radius',),
    'corners': ('radius',),
    'color': None,
}


def get_target_for_token(token_id: str) -> Optional[TargetDefinition]:
    """First definition bound to token_id (canonical entries win over aliases)."""
    for definition in TARGET_DEFINITIONS.values():
        if definition.token_id == token_id:
            return definition
    return None


def get_component_tokens(component_kind: str) -> List[str]:
    return list(COMPONENT_TOKENS.get(component_kind.lower(), ()))


def get_primary_token_for_component(component_kind: str) -> str:
    tokens = COMPONENT_TOKENS.get(component_kind.lower())
    return tokens[0] if tokens else TARGET_DEFINITIONS[DEFAULT_TARGET].token_id


def component_supports_property(component_kind: str, prop: str) -> bool:
    """
    Check whether a component kind uses a property.

    Colors are supported by every known component; scale properties only
    where the component lists the matching token.
    """
    tokens = COMPONENT_TOKENS.get(component_kind.lower())
    if not tokens:
        return False
    required = _PROPERTY_TOKENS.get(prop.lower(), (prop.lower(),))
    if required is None:
        return True
    return any(token in tokens for token in required)


def is_mode_target(target: str) -> bool:
    return target.lower().strip() in ('mode', 'theme', 'dark mode', 'light mode', 'color mode')


def _context_from(
    definition: TargetDefinition,
    scope: ResolvedScope = ResolvedScope.GLOBAL,
    component_id: Optional[str] = None,
    interpretation: Optional[str] = None,
) -> ResolvedContext:
    return ResolvedContext(
        success=True,
        scope=scope,
        token_id=definition.token_id,
        paired_foreground_token_id=definition.paired_foreground_token_id,
        persistence_path=definition.persistence_path,
        category=definition.category,
        component_id=component_id,
        interpretation=interpretation,
    )


class ContextResolver:
    """
    Resolves style command targets to concrete tokens.

    Guarantees:
    - Every successful resolution names a token from TARGET_DEFINITIONS
    - Contextual commands never fail; they fall back to the primary color
    - Non-exact matches always carry an "Interpreted X as Y" note
    """

    def __init__(
        self,
        max_distance: int = 2,
        min_similarity: float = 0.6,
        use_phonetic: bool = True,
    ):
        """
        Initialize context resolver.

        Args:
            max_distance: Maximum edit distance for fuzzy target matches
            min_similarity: Minimum fuzzy score to accept a target
            use_phonetic: Accept phonetic target matches
        """
        self.max_distance = max_distance
        self.min_similarity = min_similarity
        self.use_phonetic = use_phonetic
        self._target_names = synonyms.get_all_target_names()

    def resolve(
        self,
        intent: ParsedIntent,
        selection: Optional[SelectionContext] = None,
    ) -> ResolvedContext:
        """
        Resolve a parsed intent to a token binding.

        Args:
            intent: Parsed style intent
            selection: What the user currently has selected, if anything

        Returns:
            ResolvedContext (success=False only for unknown explicit targets)
        """
        target = (intent.target or '').lower().strip()

        if intent.is_contextual:
            return self._resolve_selection(selection)

        if target:
            definition, interpretation = self.resolve_target(target)
            if definition is None:
                logger.info(f"Unknown target: \"{target}\"")
                return ResolvedContext(
                    success=False,
                    scope=ResolvedScope.GLOBAL,
                    error=unknown_target_error(target),
                )
            if interpretation:
                logger.info(interpretation)
            return _context_from(definition, interpretation=interpretation)

        # No target: use a component selection if there is one
        if classify_selection(selection) == SelectionKind.COMPONENT:
            return self._resolve_selection(selection)
        return _context_from(TARGET_DEFINITIONS[DEFAULT_TARGET])

    def resolve_target(self, term: str) -> Tuple[Optional[TargetDefinition], Optional[str]]:
        """
        Resolve a target term to its definition.

        Returns:
            Tuple of (definition or None, interpretation note or None)
        """
        normalized = normalize_for_comparison(term)
        if not normalized:
            return None, None

        # Fast path: synonyms, then canonical names, then without " color"
        candidates = [normalized]
        if normalized.endswith(' color'):
            candidates.append(normalized[:-len(' color')].strip())

        for candidate in candidates:
            canonical = synonyms.resolve_target_synonym(candidate)
            if canonical and canonical in TARGET_DEFINITIONS:
                interpretation = None
                if synonyms.is_target_misspelling(candidate):
                    interpretation = f'Interpreted "{term}" as "{canonical}"'
                return TARGET_DEFINITIONS[canonical], interpretation
            if candidate in TARGET_DEFINITIONS:
                return TARGET_DEFINITIONS[candidate], None

        # Fuzzy match against every synonym key
        match = find_best_match(
            normalized,
            self._target_names,
            max_distance=self.max_distance,
            min_similarity=self.min_similarity,
            use_phonetic=self.use_phonetic,
        )
        if match is None:
            return None, None

        canonical = synonyms.resolve_target_synonym(match.candidate) or match.candidate
        definition = TARGET_DEFINITIONS.get(canonical)
        if definition is None:
            return None, None

        interpretation = None if match.exact else f'Interpreted "{term}" as "{canonical}"'
        logger.debug(f"Fuzzy target \"{term}\" -> {match.candidate} ({match.score:.2f})")
        return definition, interpretation

    def _resolve_selection(self, selection: Optional[SelectionContext]) -> ResolvedContext:
        """Dispatch on the closed selection union."""
        kind = classify_selection(selection)

        if kind == SelectionKind.COMPONENT:
            token_id = get_primary_token_for_component(selection.component_kind)
            definition = get_target_for_token(token_id) or TARGET_DEFINITIONS[DEFAULT_TARGET]
            return _context_from(definition, ResolvedScope.COMPONENT, component_id=selection.id)

        if kind == SelectionKind.PAGE:
            return _context_from(TARGET_DEFINITIONS[PAGE_TARGET])

        if kind == SelectionKind.OTHER:
            return _context_from(TARGET_DEFINITIONS[DEFAULT_TARGET])

        # SelectionKind.NONE
        return _context_from(TARGET_DEFINITIONS[DEFAULT_TARGET])


# ============================================================
# MODULE-LEVEL HELPERS
# ============================================================

_default_resolver: Optional[ContextResolver] = None


def resolve_context(
    intent: ParsedIntent,
    selection: Optional[SelectionContext] = None,
) -> ResolvedContext:
    """Resolve with a shared default ContextResolver."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ContextResolver()
    return _default_resolver.resolve(intent, selection)


def resolve_target(term: str) -> Tuple[Optional[TargetDefinition], Optional[str]]:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ContextResolver()
    return _default_resolver.resolve_target(term)
