"""
Command Executor.

Orchestrates one command end to end:
raw text -> parse -> branch on intent type -> resolve target and value
-> write tokens -> schedule persistence -> ExecutionResult.

The executor never raises for user-input problems; every failure comes
back as an ExecutionResult with success=False and an ErrorKind.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from loguru import logger

from stylecmd.config import InterpreterConfig
from stylecmd.core.color import contrasting_foreground, is_raw_color, to_hsl_value
from stylecmd.core.contracts import (
    Delta,
    ErrorKind,
    ExecutionResult,
    IntentType,
    ParsedIntent,
    ResolvedContext,
    SelectionContext,
    TargetCategory,
    ThemeMode,
    TokenChange,
)
from stylecmd.core.token_store import InMemoryTokenStore, TokenStore
from stylecmd.intent import synonyms
from stylecmd.intent.command_parser import CommandParser, normalize_value
from stylecmd.intent.context_resolver import ContextResolver, TARGET_DEFINITIONS, get_target_for_token
from stylecmd.intent.error_messages import (
    help_message,
    invalid_value_error,
    unknown_color_error,
    unknown_preset_error,
    unparseable_command_error,
)
from stylecmd.intent.fuzzy_matcher import find_best_match
from stylecmd.intent.relative_computer import (
    RADIUS_SCALE,
    SCALES,
    RelativeValueComputer,
    compute_relative_color,
    resolve_scale_term,
)


# ============================================================
# VALUE TABLES
# ============================================================

COLOR_VALUES: Mapping[str, str] = MappingProxyType({
    # Blues
    'blue': '217 91% 60%',
    'light-blue': '199 89% 68%',
    'light blue': '199 89% 68%',
    'dark-blue': '217 91% 45%',
    'dark blue': '217 91% 45%',
    'sky': '199 89% 48%',
    'navy': '224 64% 33%',
    'azure': '210 100% 50%',
    'cobalt': '225 73% 57%',
    'indigo': '239 84% 60%',
    'light-indigo': '239 84% 72%',
    'dark-indigo': '239 84% 45%',
    'violet': '258 90% 60%',
    'light-violet': '258 90% 72%',
    'dark-violet': '258 90% 45%',
    'cyan': '189 94% 43%',
    'light-cyan': '189 94% 60%',
    'dark-cyan': '189 94% 32%',
    'teal': '173 80% 40%',
    'light-teal': '173 80% 55%',
    'dark-teal': '173 80% 30%',

    # Greens
    'green': '142 71% 45%',
    'light-green': '142 69% 58%',
    'light green': '142 69% 58%',
    'dark-green': '142 71% 35%',
    'dark green': '142 71% 35%',
    'emerald': '160 84% 39%',
    'lime': '84 81% 44%',
    'mint': '158 64% 52%',
    'sage': '138 30% 50%',
    'forest': '141 79% 25%',
    'olive': '80 39% 40%',

    # Reds
    'red': '0 84% 60%',
    'light-red': '0 84% 70%',
    'light red': '0 84% 70%',
    'dark-red': '0 84% 45%',
    'dark red': '0 84% 45%',
    'crimson': '348 83% 47%',
    'scarlet': '4 90% 58%',
    'ruby': '350 89% 45%',
    'rose': '350 89% 60%',
    'coral': '16 85% 57%',
    'salmon': '6 93% 71%',
    'maroon': '0 100% 25%',

    # Pinks
    'pink': '330 81% 60%',
    'light-pink': '330 81% 75%',
    'light pink': '330 81% 75%',
    'dark-pink': '330 81% 45%',
    'hot-pink': '330 100% 71%',
    'hot pink': '330 100% 71%',
    'magenta': '300 76% 55%',
    'fuchsia': '292 84% 61%',
    'blush': '350 50% 80%',

    # Purples
    'purple': '263 70% 50%',
    'light-purple': '263 70% 65%',
    'light purple': '263 70% 65%',
    'dark-purple': '263 70% 35%',
    'dark purple': '263 70% 35%',
    'lavender': '270 67% 75%',
    'plum': '300 47% 45%',
    'grape': '280 60% 45%',
    'orchid': '302 59% 65%',
    'mauve': '292 12% 65%',

    # Yellows
    'yellow': '48 96% 53%',
    'light-yellow': '48 96% 70%',
    'light yellow': '48 96% 70%',
    'dark-yellow': '48 96% 40%',
    'gold': '45 93% 47%',
    'golden': '45 93% 47%',
    'amber': '38 92% 50%',
    'honey': '38 85% 50%',
    'mustard': '47 96% 42%',
    'lemon': '54 100% 62%',

    # Oranges
    'orange': '25 95% 53%',
    'light-orange': '25 95% 65%',
    'light orange': '25 95% 65%',
    'dark-orange': '25 95% 40%',
    'dark orange': '25 95% 40%',
    'tangerine': '28 100% 55%',
    'peach': '24 100% 75%',
    'apricot': '29 100% 70%',
    'rust': '18 75% 45%',
    'burnt-orange': '18 75% 45%',
    'burnt orange': '18 75% 45%',
    'pumpkin': '24 97% 47%',

    # Neutrals
    'gray': '220 9% 46%',
    'grey': '220 9% 46%',
    'light-gray': '220 9% 70%',
    'light gray': '220 9% 70%',
    'light-grey': '220 9% 70%',
    'light grey': '220 9% 70%',
    'dark-gray': '220 9% 30%',
    'dark gray': '220 9% 30%',
    'dark-grey': '220 9% 30%',
    'dark grey': '220 9% 30%',
    'silver': '0 0% 75%',
    'slate': '215 16% 47%',
    'charcoal': '220 13% 26%',
    'zinc': '240 5% 46%',
    'stone': '25 6% 45%',
    'ash': '0 0% 55%',
    'neutral': '0 0% 50%',

    # Black and white
    'white': '0 0% 100%',
    'off-white': '0 0% 96%',
    'off white': '0 0% 96%',
    'cream': '39 77% 94%',
    'ivory': '60 100% 97%',
    'snow': '0 0% 98%',
    'black': '0 0% 0%',
    'jet': '0 0% 5%',
    'midnight': '222 47% 11%',
    'onyx': '0 0% 15%',

    # Semantic
    'success': '142 71% 45%',
    'error': '0 84% 60%',
    'warning': '38 92% 50%',
    'info': '217 91% 60%',
    'danger': '0 84% 60%',

    # Brand-like
    'facebook': '220 46% 48%',
    'twitter': '203 89% 53%',
    'instagram': '330 70% 55%',
    'linkedin': '210 80% 40%',
    'youtube': '0 100% 50%',
    'spotify': '141 73% 42%',
})

RADIUS_VALUES: Mapping[str, str] = MappingProxyType({
    'none': '0',
    'zero': '0',
    '0': '0',
    'sharp': '0',
    'square': '0',
    'squared': '0',
    'angular': '0',
    'boxy': '0',
    'sm': '0.25rem',
    'small': '0.25rem',
    'tiny': '0.25rem',
    'slight': '0.25rem',
    'subtle': '0.25rem',
    'minimal': '0.25rem',
    'md': '0.5rem',
    'medium': '0.5rem',
    'default': '0.5rem',
    'normal': '0.5rem',
    'regular': '0.5rem',
    'rounded': '0.5rem',
    'moderate': '0.5rem',
    'lg': '0.75rem',
    'large': '0.75rem',
    'big': '0.75rem',
    'soft': '0.75rem',
    'smooth': '0.75rem',
    'xl': '1rem',
    'extra-large': '1rem',
    'extra large': '1rem',
    'very rounded': '1rem',
    'very soft': '1rem',
    '2xl': '1.5rem',
    'full': '9999px',
    'pill': '9999px',
    'circle': '9999px',
    'circular': '9999px',
    'round': '9999px',
    'capsule': '9999px',
    'max': '9999px',
    'maximum': '9999px',
})

# Preset directive word -> direction (None = leave as is)
PRESET_DIRECTIONS: Dict[str, Optional[Delta]] = {
    'increase': Delta.MORE,
    'high': Delta.MORE,
    'decrease': Delta.LESS,
    'low': Delta.LESS,
    'moderate': None,
}

# Presets recolor the brand color
PRESET_COLOR_TARGET = 'primary'

Lookup = Tuple[Optional[str], Optional[str]]


class CommandExecutor:
    """
    Executes style commands against a token store.

    Guarantees:
    - User-input problems never raise; they return success=False
    - Visibility, layout, undo and redo never touch the store
    - changes lists every token write in the order it happened
    - Persistence is fire-and-forget and cannot fail a command
    """

    def __init__(
        self,
        store: TokenStore,
        persistence=None,
        config: Optional[InterpreterConfig] = None,
        parser: Optional[CommandParser] = None,
        resolver: Optional[ContextResolver] = None,
    ):
        """
        Initialize executor.

        Args:
            store: Token store to read and write
            persistence: Object with schedule_persist(key, patch), e.g. ThemeSyncScheduler
            config: Interpreter configuration (thresholds, foreground constants)
            parser: Command parser (a default CommandParser if omitted)
            resolver: Context resolver (built from config if omitted)
        """
        self.store = store
        self.persistence = persistence
        self.config = config or InterpreterConfig()
        self.parser = parser or CommandParser()
        self.resolver = resolver or ContextResolver(
            max_distance=self.config.target_max_distance,
            min_similarity=self.config.target_min_similarity,
            use_phonetic=self.config.use_phonetic,
        )
        self.relative = RelativeValueComputer(store)

        self._color_names = list(COLOR_VALUES.keys())
        self._radius_names = list(RADIUS_VALUES.keys())

        logger.debug(f"CommandExecutor ready (tolerance={self.config.tolerance})")

    # ============================================================
    # ENTRY POINTS
    # ============================================================

    def execute(
        self,
        text: str,
        selection: Optional[SelectionContext] = None,
        persistence_key: Optional[str] = None,
    ) -> ExecutionResult:
        """
        Execute a natural language command.

        Args:
            text: Raw command text
            selection: Current selection, if any
            persistence_key: Key to persist theme changes under (no persistence if None)

        Returns:
            ExecutionResult describing what changed
        """
        if text.lower().strip() in ('help', '?'):
            return ExecutionResult(success=True, message=help_message())

        intent = self.parser.parse(text)
        logger.info(f"Command: \"{text.strip()}\" -> {intent.type.value}")
        return self.execute_intent(intent, selection, persistence_key)

    def quick_execute(
        self,
        text: str,
        selection: Optional[SelectionContext] = None,
        persistence_key: Optional[str] = None,
    ) -> Tuple[bool, str]:
        """Execute and return only (success, message)."""
        result = self.execute(text, selection, persistence_key)
        return result.success, result.message

    def execute_intent(
        self,
        intent: ParsedIntent,
        selection: Optional[SelectionContext] = None,
        persistence_key: Optional[str] = None,
    ) -> ExecutionResult:
        """Execute an already-parsed intent."""
        if intent.type == IntentType.UNKNOWN:
            return self._failure(
                intent,
                unparseable_command_error(intent.raw.strip()),
                ErrorKind.UNPARSEABLE_COMMAND,
                error='Could not parse command',
            )

        if intent.type == IntentType.UNDO:
            return ExecutionResult(success=True, message='Use Ctrl+Z to undo', intent_type=intent.type)

        if intent.type == IntentType.REDO:
            return ExecutionResult(success=True, message='Use Ctrl+Y to redo', intent_type=intent.type)

        if intent.type == IntentType.MODE:
            return self._execute_mode(intent.value)

        if intent.type == IntentType.VISIBILITY:
            return self._execute_visibility(intent)

        if intent.type == IntentType.LAYOUT:
            return self._execute_layout(intent)

        if intent.type == IntentType.PRESET:
            return self._execute_preset(intent, persistence_key)

        return self._execute_style(intent, selection, persistence_key)

    # ============================================================
    # VALUE LOOKUPS
    # ============================================================

    def lookup_color(self, name: str) -> Lookup:
        """
        Resolve a color word to an HSL triple.

        Returns:
            (value or None, interpretation note for fuzzy hits)
        """
        normalized = name.lower().strip()

        if normalized in COLOR_VALUES:
            return COLOR_VALUES[normalized], None

        canonical = synonyms.resolve_color_synonym(normalized)
        if canonical and canonical in COLOR_VALUES:
            return COLOR_VALUES[canonical], None

        match = find_best_match(
            normalized,
            self._color_names,
            max_distance=self.config.color_max_distance,
            min_similarity=self.config.color_min_similarity,
            use_phonetic=self.config.use_phonetic,
        )
        if match is None:
            return None, None

        note = None if match.exact else f'Interpreted "{name}" as "{match.candidate}"'
        return COLOR_VALUES[match.candidate], note

    def lookup_radius(self, term: str) -> Lookup:
        """Resolve a corner word ("pill", "sharp", "lg") to a radius length."""
        normalized = term.lower().strip()

        if normalized in RADIUS_VALUES:
            return RADIUS_VALUES[normalized], None

        canonical = synonyms.resolve_radius_synonym(normalized)
        if canonical and canonical in RADIUS_VALUES:
            return RADIUS_VALUES[canonical], None

        # Phonetic codes are too coarse for short size words
        match = find_best_match(
            normalized,
            self._radius_names,
            max_distance=2,
            min_similarity=self.config.radius_min_similarity,
            use_phonetic=False,
        )
        if match is None:
            return None, None

        note = None if match.exact else f'Interpreted "{term}" as "{match.candidate}"'
        return RADIUS_VALUES[match.candidate], note

    def lookup_scale(self, token_id: str, term: str) -> Lookup:
        """Resolve a size word on the spacing / font-size / font-weight scales."""
        resolved = resolve_scale_term(token_id, term)
        if resolved is not None:
            return resolved[1], None

        scale = SCALES[token_id]
        candidates = list(scale.aliases.keys()) + list(scale.values.keys())
        match = find_best_match(
            term.lower().strip(),
            candidates,
            max_distance=2,
            min_similarity=self.config.radius_min_similarity,
            use_phonetic=False,
        )
        if match is None:
            return None, None

        resolved = resolve_scale_term(token_id, match.candidate)
        if resolved is None:
            return None, None
        return resolved[1], f'Interpreted "{term}" as "{match.candidate}"'

    # ============================================================
    # INTENT HANDLERS
    # ============================================================

    def _execute_mode(self, value: Optional[str]) -> ExecutionResult:
        mode_value = (value or '').lower().strip()
        resolved = synonyms.resolve_mode_synonym(mode_value) or mode_value

        current = self.store.get_mode()
        if resolved == 'dark':
            new_mode = ThemeMode.DARK
        elif resolved == 'light':
            new_mode = ThemeMode.LIGHT
        else:
            # Anything else toggles
            new_mode = ThemeMode.LIGHT if current == ThemeMode.DARK else ThemeMode.DARK

        self.store.set_mode(new_mode)

        label = 'Dark' if new_mode == ThemeMode.DARK else 'Light'
        return ExecutionResult(
            success=True,
            message=f'Switched to {label} mode ✓',
            changes=[TokenChange('mode', current.value, new_mode.value)],
            intent_type=IntentType.MODE,
        )

    def _execute_visibility(self, intent: ParsedIntent) -> ExecutionResult:
        target = intent.target or 'element'
        action = 'hide' if intent.value == 'hidden' else 'show'
        return ExecutionResult(
            success=True,
            message=f'To {action} "{target}", use the Page Tree panel on the left to find and modify the component.',
            intent_type=intent.type,
        )

    def _execute_layout(self, intent: ParsedIntent) -> ExecutionResult:
        layout_type = intent.value or 'unknown'
        return ExecutionResult(
            success=True,
            message=(
                f'Layout changes like "{layout_type}" require editing the page structure. '
                'Use the Page Tree panel to modify layout.'
            ),
            intent_type=intent.type,
        )

    def _execute_preset(self, intent: ParsedIntent, persistence_key: Optional[str]) -> ExecutionResult:
        """Expand a preset's directives into concrete token writes."""
        name = (intent.value or '').lower().strip()
        name = synonyms.resolve_preset_phrase(name) or name
        preset = synonyms.STYLE_PRESETS.get(name)

        if preset is None:
            return self._failure(
                intent,
                unknown_preset_error(name),
                ErrorKind.UNKNOWN_PRESET,
                error=f'Unknown preset: {name}',
            )

        changes: List[TokenChange] = []
        patch: Dict[str, Dict[str, str]] = {}

        # Color directives stack on one working value, written once
        color_definition = TARGET_DEFINITIONS[PRESET_COLOR_TARGET]
        working = self.store.get(color_definition.token_id)
        color_changed = False

        for prop, directive in preset.styles.items():
            if prop == 'radius':
                value = RADIUS_SCALE.values.get(directive)
                if value is None:
                    logger.warning(f"Preset {name}: unknown radius step {directive}")
                    continue
                radius = TARGET_DEFINITIONS['radius']
                changes.append(self._write(radius.token_id, value))
                self._add_to_patch(patch, radius.persistence_path, value)
                continue

            delta = PRESET_DIRECTIONS.get(directive)
            if delta is None:
                continue
            result = compute_relative_color(working, delta, prop)
            if not result.success:
                logger.warning(f"Preset {name}: skipped {prop} ({result.error})")
                continue
            working = result.new_value
            color_changed = True

        if color_changed:
            changes.append(self._write(color_definition.token_id, working))
            self._add_to_patch(patch, color_definition.persistence_path, working)
            changes.extend(self._write_foreground(color_definition.paired_foreground_token_id, working))

        self._persist(persistence_key, patch)

        logger.info(f"Applied preset {name} ({len(changes)} change(s))")
        return ExecutionResult(
            success=True,
            message=f'Applied "{name}" style: {preset.description}',
            changes=changes,
            intent_type=intent.type,
        )

    def _execute_style(
        self,
        intent: ParsedIntent,
        selection: Optional[SelectionContext],
        persistence_key: Optional[str],
    ) -> ExecutionResult:
        context = self.resolver.resolve(intent, selection)

        if not context.success:
            return self._failure(
                intent,
                context.error or 'Could not resolve target',
                ErrorKind.UNKNOWN_TARGET,
                error=context.error,
            )

        if not context.token_id:
            return self._failure(intent, 'No token to update', ErrorKind.UNKNOWN_TARGET)

        # "set the theme to dark"
        if context.category == TargetCategory.MODE:
            return self._execute_mode(intent.value)

        if intent.delta is not None and intent.value:
            return self._execute_relative(intent, context, persistence_key)
        return self._execute_absolute(intent, context, persistence_key)

    def _execute_relative(
        self,
        intent: ParsedIntent,
        context: ResolvedContext,
        persistence_key: Optional[str],
    ) -> ExecutionResult:
        result = self.relative.compute(intent.value, intent.delta, context.token_id)
        if not result.success:
            return self._failure(
                intent,
                result.error or 'Could not compute relative change',
                ErrorKind.UNRESOLVABLE_RELATIVE,
            )

        # Scale properties live in their own token, not the bound one
        token_id = result.token_id or context.token_id
        if token_id == context.token_id:
            persistence_path = context.persistence_path
            foreground = context.paired_foreground_token_id
        else:
            definition = get_target_for_token(token_id)
            persistence_path = definition.persistence_path if definition else None
            foreground = None

        changes = [self._write(token_id, result.new_value)]
        changes.extend(self._write_foreground(foreground, result.new_value))
        self._persist_value(persistence_key, persistence_path, result.new_value)

        return ExecutionResult(
            success=True,
            message=f'Made {intent.value} {intent.delta.value}',
            changes=changes,
            interpretation=context.interpretation,
            intent_type=intent.type,
        )

    def _execute_absolute(
        self,
        intent: ParsedIntent,
        context: ResolvedContext,
        persistence_key: Optional[str],
    ) -> ExecutionResult:
        value = normalize_value(intent.value or '')
        token_id = context.token_id
        persistence_path = context.persistence_path
        foreground = context.paired_foreground_token_id
        target_label = 'it' if intent.is_contextual else (intent.target or 'color')

        # "make it sharp": a corner word on a contextual color target
        if (token_id not in SCALES and intent.is_contextual
                and self._is_radius_word(value) and not self._is_color_word(value)):
            radius = TARGET_DEFINITIONS['radius']
            token_id, persistence_path, foreground = radius.token_id, radius.persistence_path, None

        new_value: Optional[str] = None
        note: Optional[str] = None

        if token_id == RADIUS_SCALE.token_id:
            new_value, note = self.lookup_radius(value)
            description = f'Changed corners to {intent.value}'
        elif token_id in SCALES:
            new_value, note = self.lookup_scale(token_id, value)
            description = f'Changed {token_id.replace("-", " ")} to {intent.value}'
        elif value and is_raw_color(value):
            new_value = to_hsl_value(value)
            description = f'Changed {target_label} to {intent.value}'
        else:
            new_value, note = self.lookup_color(value)
            description = f'Changed {target_label} to {intent.value}'

        if not new_value:
            shown = intent.value or 'value'
            if token_id == RADIUS_SCALE.token_id:
                message = invalid_value_error('corners', shown)
            elif token_id in SCALES:
                message = invalid_value_error(token_id, shown)
            else:
                message = unknown_color_error(shown)
            return self._failure(intent, message, ErrorKind.UNKNOWN_VALUE, error=f'Unknown value: {shown}')

        changes = [self._write(token_id, new_value)]
        changes.extend(self._write_foreground(foreground, new_value))
        self._persist_value(persistence_key, persistence_path, new_value)

        return ExecutionResult(
            success=True,
            message=description,
            changes=changes,
            interpretation=note or context.interpretation,
            intent_type=intent.type,
        )

    # ============================================================
    # HELPERS
    # ============================================================

    def _is_radius_word(self, value: str) -> bool:
        return value in RADIUS_VALUES or synonyms.resolve_radius_synonym(value) is not None

    def _is_color_word(self, value: str) -> bool:
        return value in COLOR_VALUES or synonyms.resolve_color_synonym(value) is not None

    def _write(self, token_id: str, value: str) -> TokenChange:
        old_value = self.store.get(token_id)
        self.store.set(token_id, value)
        return TokenChange(token_id, old_value, value)

    def _write_foreground(self, foreground_token_id: Optional[str], surface: str) -> List[TokenChange]:
        """Write the contrasting foreground for a recolored surface, if it has one."""
        if not foreground_token_id:
            return []
        value = contrasting_foreground(
            surface,
            threshold=self.config.foreground_threshold,
            dark=self.config.dark_foreground,
            light=self.config.light_foreground,
        )
        if value is None:
            return []
        return [self._write(foreground_token_id, value)]

    @staticmethod
    def _add_to_patch(patch: Dict, persistence_path: Optional[str], value: str):
        if not persistence_path:
            return
        section, _, key = persistence_path.partition('.')
        if key:
            patch.setdefault(section, {})[key] = value
        else:
            patch[section] = value

    def _persist_value(self, persistence_key: Optional[str], persistence_path: Optional[str], value: str):
        patch: Dict = {}
        self._add_to_patch(patch, persistence_path, value)
        self._persist(persistence_key, patch)

    def _persist(self, persistence_key: Optional[str], patch: Dict):
        """Hand a patch to the persistence collaborator; failures are logged only."""
        if not persistence_key or not patch or self.persistence is None:
            return
        try:
            self.persistence.schedule_persist(persistence_key, patch)
        except Exception as e:
            logger.error(f"Failed to schedule theme persist for {persistence_key}: {e}")

    def _failure(
        self,
        intent: ParsedIntent,
        message: str,
        kind: ErrorKind,
        error: Optional[str] = None,
    ) -> ExecutionResult:
        logger.info(f"Command failed ({kind.value}): \"{intent.raw.strip()}\"")
        return ExecutionResult(
            success=False,
            message=message,
            error=error or message,
            intent_type=intent.type,
            error_kind=kind,
        )


# ============================================================
# MODULE-LEVEL HELPERS
# ============================================================

_default_executor: Optional[CommandExecutor] = None


def get_default_executor() -> CommandExecutor:
    """Shared executor over a process-wide InMemoryTokenStore."""
    global _default_executor
    if _default_executor is None:
        _default_executor = CommandExecutor(InMemoryTokenStore())
    return _default_executor


def execute_command(
    text: str,
    selection: Optional[SelectionContext] = None,
    persistence_key: Optional[str] = None,
) -> ExecutionResult:
    """Execute with the shared default executor."""
    return get_default_executor().execute(text, selection, persistence_key)


def quick_execute(
    text: str,
    selection: Optional[SelectionContext] = None,
    persistence_key: Optional[str] = None,
) -> Tuple[bool, str]:
    return get_default_executor().quick_execute(text, selection, persistence_key)
