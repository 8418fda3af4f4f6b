"""Tests for target and selection resolution."""

import pytest

from stylecmd.core.contracts import (
    CONTEXTUAL_TARGET,
    IntentType,
    ParsedIntent,
    ResolvedScope,
    Scope,
    SelectionContext,
    TargetCategory,
)
from stylecmd.intent.context_resolver import (
    ContextResolver,
    component_supports_property,
    get_component_tokens,
    get_primary_token_for_component,
    get_target_for_token,
    is_mode_target,
    resolve_context,
)


def style(target=None, value="blue", scope=None):
    return ParsedIntent(type=IntentType.STYLE, raw="test", target=target, value=value, scope=scope)


def contextual():
    return style(target=CONTEXTUAL_TARGET, scope=Scope.SELECTED)


@pytest.fixture
def resolver():
    return ContextResolver()


class TestExplicitTargets:
    """Tests for named targets."""

    def test_canonical(self, resolver):
        context = resolver.resolve(style("background"))
        assert context.success
        assert context.token_id == "background"
        assert context.persistence_path == "colors.background"
        assert context.scope == ResolvedScope.GLOBAL
        assert context.interpretation is None

    def test_synonym(self, resolver):
        context = resolver.resolve(style("brand color"))
        assert context.token_id == "primary"
        assert context.paired_foreground_token_id == "primary-foreground"

    def test_text_maps_to_foreground_token(self, resolver):
        context = resolver.resolve(style("text"))
        assert context.token_id == "foreground"
        assert context.persistence_path == "colors.text"

    def test_trailing_color_is_dropped(self, resolver):
        context = resolver.resolve(style("sidebar color"))
        assert context.token_id == "sidebar-background"

    def test_corners_are_radius(self, resolver):
        context = resolver.resolve(style("corners"))
        assert context.token_id == "radius"
        assert context.category == TargetCategory.SPACING
        assert context.persistence_path == "spacing.borderRadius"

    @pytest.mark.parametrize("term", ["chart 2", "chart2", "chart-2"])
    def test_numbered_chart(self, resolver, term):
        context = resolver.resolve(style(term))
        assert context.token_id == "chart-2"
        assert context.persistence_path == "colors.chart2"
        assert context.interpretation is None

    def test_known_misspelling_is_reported(self, resolver):
        context = resolver.resolve(style("backgroud"))
        assert context.token_id == "background"
        assert context.interpretation == 'Interpreted "backgroud" as "background"'

    def test_fuzzy_typo(self, resolver):
        context = resolver.resolve(style("buttns"))
        assert context.success
        assert context.token_id == "primary"
        assert context.interpretation.startswith('Interpreted "buttns"')

    def test_unknown_target(self, resolver):
        context = resolver.resolve(style("flobbernaut"))
        assert not context.success
        assert context.token_id is None
        assert 'I didn\'t recognize "flobbernaut"' in context.error

    def test_strict_resolver_rejects_distant_typo(self):
        strict = ContextResolver(max_distance=0, min_similarity=0.99, use_phonetic=False)
        definition, _ = strict.resolve_target("bakgrnd")
        assert definition is None


class TestSelection:
    """Contextual commands follow the current selection."""

    def test_component(self, resolver):
        selection = SelectionContext(kind="component", id="c1", component_kind="card")
        context = resolver.resolve(contextual(), selection)
        assert context.token_id == "card"
        assert context.paired_foreground_token_id == "card-foreground"
        assert context.scope == ResolvedScope.COMPONENT
        assert context.component_id == "c1"

    def test_unknown_component_kind_uses_primary(self, resolver):
        selection = SelectionContext(kind="component", id="c9", component_kind="widget")
        context = resolver.resolve(contextual(), selection)
        assert context.token_id == "primary"
        assert context.persistence_path == "colors.primary"

    def test_page(self, resolver):
        context = resolver.resolve(contextual(), SelectionContext(kind="page", id="p1"))
        assert context.token_id == "background"
        assert context.scope == ResolvedScope.GLOBAL

    @pytest.mark.parametrize("selection", [
        None,
        SelectionContext(),
        SelectionContext(kind="dataModel", id="m1"),
        SelectionContext(kind="component", id="c1"),
    ])
    def test_fallback_is_primary(self, resolver, selection):
        context = resolver.resolve(contextual(), selection)
        assert context.success
        assert context.token_id == "primary"

    def test_missing_target_uses_component_selection(self, resolver):
        selection = SelectionContext(kind="component", id="c2", component_kind="sidebar")
        context = resolver.resolve(style(target=None), selection)
        assert context.token_id == "sidebar-background"

    def test_missing_target_without_selection(self):
        context = resolve_context(style(target=None))
        assert context.token_id == "primary"


class TestHelpers:
    """Tests for the component and target helpers."""

    def test_target_for_token_prefers_canonical(self):
        assert get_target_for_token("primary").description == "Primary/brand color"
        assert get_target_for_token("nonexistent") is None

    def test_component_tokens(self):
        assert get_component_tokens("Card") == ["card", "card-foreground", "radius"]
        assert get_component_tokens("widget") == []
        assert get_primary_token_for_component("button") == "primary"

    def test_supports_property(self):
        assert component_supports_property("card", "radius")
        assert not component_supports_property("text", "corners")
        assert component_supports_property("chart", "color")
        assert not component_supports_property("widget", "color")

    def test_mode_target(self):
        assert is_mode_target(" Theme ")
        assert not is_mode_target("background")
