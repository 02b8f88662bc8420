"""Tests for parsing whole rule texts."""

import pytest

from guarding.errors import RuleSyntaxError, StringLiteralError, UnsupportedFormError
from guarding.models import (
    AllScope,
    AssignableScope,
    EmptyAssert,
    ExtendsScope,
    GuardRule,
    IntAssert,
    LayerRule,
    LeveledAssert,
    MatchScope,
    Operator,
    PathScope,
    PropertyChain,
    RuleLevel,
    StringAssert,
    UnsupportedScope,
)
from guarding.parser import parse, parse_file
from tests.conftest import rules_architecture


class TestParseRules:
    """End-to-end tests for ordinary rules."""

    def test_parse_rule_level(self):
        """Test a rule without a scope clause."""
        rules = parse('class::name contains "Controller";')

        assert len(rules) == 1
        rule = rules[0]
        assert rule.level == RuleLevel.CLASS
        assert rule.scope == AllScope()
        assert rule.ops == (Operator.CONTAINS,)
        assert rule.expr == PropertyChain(("name",))
        assert rule.assertion == StringAssert('"Controller"')

    def test_parse_extends_scope_without_negation(self):
        rules = parse('class(extends "Connection.class")::name endsWith "Connection";')

        assert rules[0].ops == (Operator.ENDS_WITH,)
        assert rules[0].scope == ExtendsScope('"Connection.class"')

    def test_parse_not_keyword(self):
        """Test that `not` puts the negation marker first."""
        rules = parse('class(extends "Connection.class")::name should not endsWith "Connection";')

        assert rules[0].ops == (Operator.NOT, Operator.ENDS_WITH)
        assert rules[0].negated
        assert rules[0].operator == Operator.ENDS_WITH

    def test_parse_not_symbol(self):
        rules = parse('class("..myapp..")::function.name !contains("");')

        assert rules[0].ops == (Operator.NOT, Operator.CONTAINS)

    def test_parse_path_scope_keeps_quotes(self):
        """Test the path scope literal and a two-segment property chain."""
        rules = parse('class("..myapp..")::function.name should contains("");')

        assert rules[0].scope == PathScope('"..myapp.."')
        assert rules[0].expr == PropertyChain(("function", "name"))
        assert rules[0].assertion == StringAssert('""')

    def test_parse_path_scope_without_quotes(self, unquoted_settings):
        rules = parse('class("..myapp..")::function.name should contains("");', unquoted_settings)

        assert rules[0].scope == PathScope("..myapp..")
        assert rules[0].assertion == StringAssert("")

    def test_parse_scope_escapes_are_decoded(self):
        rules = parse('class("a\\tb")::name contains "X";')

        assert rules[0].scope == PathScope('"a\tb"')

    def test_parse_container_scope(self):
        """Test an assignable scope with a leveled assertion and no expression."""
        rules = parse('class(assignable "EntityManager.class") resideIn package("..persistence.");')

        rule = rules[0]
        assert rule.scope == AssignableScope('"EntityManager.class"')
        assert rule.expr is None
        assert rule.ops == (Operator.RESIDE_IN,)
        assert rule.assertion == LeveledAssert(RuleLevel.PACKAGE, '"..persistence."')

    def test_parse_regex_scope(self):
        rules = parse('package(match("^/app")) endsWith "Connection";')

        assert rules[0].level == RuleLevel.PACKAGE
        assert rules[0].scope == MatchScope('"^/app"')

    def test_parse_class_compare(self):
        code = """class("..myapp..")::function.name should not contains("");
class("..myapp..")::function.name !contains("");

class("..myapp..")::vars.len should <= 20;
class("..myapp..")::function.vars.len should <= 20;
"""
        rules = parse(code)

        assert len(rules) == 4
        assert rules[2].ops == (Operator.LTE,)
        assert rules[2].assertion == IntAssert(20)
        assert rules[3].expr == PropertyChain(("function", "vars", "len"))

    def test_parse_simple_usage(self):
        code = """class::name.len should < 20;
function::name.len should < 30;
module::package.len should <= 20;
"""
        rules = parse(code)

        assert [rule.level for rule in rules] == [RuleLevel.CLASS, RuleLevel.FUNCTION, RuleLevel.MODULE]
        assert rules[2].expr == PropertyChain(("package", "len"))

    def test_arrow_is_synonym_for_double_colon(self):
        arrow = parse("class -> name.len should < 20;")
        colons = parse("class::name.len should < 20;")

        assert arrow == colons

    def test_array_assertion(self, unquoted_settings):
        rules = parse('class::name startsWith ["Abstract", "Base"];', unquoted_settings)

        assert rules[0].assertion.values == ("Abstract", "Base")

    def test_missing_assertion_is_empty(self):
        rules = parse("class::name accessed;")

        assert rules[0].assertion == EmptyAssert()

    def test_comments_are_ignored(self):
        rules = parse('// first\nclass::name contains "A"; // trailing\n')

        assert len(rules) == 1

    def test_empty_input(self):
        assert parse("") == []

    def test_source_order_is_preserved(self):
        code = 'file::name endsWith "a";\nfunction::name startsWith "b";\nclass::name == "c";'
        rules = parse(code)

        assert [rule.level for rule in rules] == [RuleLevel.FILE, RuleLevel.FUNCTION, RuleLevel.CLASS]
        assert [rule.ops for rule in rules] == [
            (Operator.ENDS_WITH,),
            (Operator.STARTS_WITH,),
            (Operator.EQ,),
        ]

    def test_parse_is_repeatable(self):
        code = 'class("..myapp..")::function.name should not contains("");'
        assert parse(code) == parse(code)


class TestRuleLevels:
    """Tests for the rule-level keywords."""

    @pytest.mark.parametrize(
        "keyword,level",
        [
            ("module", RuleLevel.MODULE),
            ("package", RuleLevel.PACKAGE),
            ("function", RuleLevel.FUNCTION),
            ("file", RuleLevel.FILE),
            ("class", RuleLevel.CLASS),
        ],
    )
    def test_keyword_maps_to_level(self, keyword, level):
        rules = parse(f'{keyword}::name contains "x";')
        assert rules[0].level == level

    def test_unknown_keyword_is_a_syntax_error(self):
        with pytest.raises(RuleSyntaxError):
            parse('method::name contains "x";')


class TestOperators:
    """Tests for every comparison and string operator."""

    @pytest.mark.parametrize(
        "text,operator",
        [
            ("<=", Operator.LTE),
            (">=", Operator.GTE),
            ("<", Operator.LT),
            (">", Operator.GT),
            ("==", Operator.EQ),
            ("contains", Operator.CONTAINS),
            ("endsWith", Operator.ENDS_WITH),
            ("startsWith", Operator.STARTS_WITH),
            ("resideIn", Operator.RESIDE_IN),
            ("accessed", Operator.ACCESSED),
            ("dependBy", Operator.DEPEND_BY),
        ],
    )
    def test_operator(self, text, operator):
        bare = parse(f'class::name {text} "x";')
        negated = parse(f'class::name should not {text} "x";')

        assert bare[0].ops == (operator,)
        assert negated[0].ops == (Operator.NOT, operator)


class TestLayerRules:
    """Tests for layer declarations."""

    def test_parse_layer(self):
        code = """layer("onion")
    ::domainModel("")
    ::domainService("")
    ::applicationService("")
    ::adapter("com.phodal.com", "zero");

"""
        rules = parse(code)

        assert len(rules) == 1
        layer = rules[0]
        assert isinstance(layer, LayerRule)
        assert layer.name == '"onion"'
        assert layer.roles() == ["domainModel", "domainService", "applicationService", "adapter"]
        assert layer.bindings[3].patterns == ('"com.phodal.com"', '"zero"')

    def test_layer_without_semicolon(self, unquoted_settings):
        rules = parse('layer("hex")::core("a.b")\nclass::name contains "x";', unquoted_settings)

        assert isinstance(rules[0], LayerRule)
        assert rules[0].name == "hex"
        assert isinstance(rules[1], GuardRule)


class TestUnsupportedForms:
    """Tests for forms the grammar accepts but that have no model yet."""

    def test_reside_in_scope_yields_marker(self):
        rules = parse('class(resideIn "com.example")::name contains "X";')

        scope = rules[0].scope
        assert isinstance(scope, UnsupportedScope)
        assert scope.kind == "scope_reside_in"
        assert '"com.example"' in scope.text

    def test_reside_in_scope_is_logged(self, caplog):
        with caplog.at_level("WARNING"):
            parse('class(resideIn "com.example")::name contains "X";')
        assert "Unsupported scope" in caplog.text

    def test_strict_mode_raises(self, strict_settings):
        with pytest.raises(UnsupportedFormError):
            parse('class(resideIn "com.example")::name contains "X";', strict_settings)


class TestParseErrors:
    """Tests for rejected input."""

    def test_syntax_error_reports_position(self):
        with pytest.raises(RuleSyntaxError) as exc_info:
            parse('class::name contains "x";\nclass::name ~ "y";')

        assert exc_info.value.line == 2

    def test_missing_semicolon(self):
        """Test that a premature end points just past the last character."""
        with pytest.raises(RuleSyntaxError) as exc_info:
            parse('class::name contains "x"')

        assert exc_info.value.line == 1
        assert exc_info.value.column == 25
        assert "line 1, column 25" in str(exc_info.value)

    def test_end_of_input_on_later_line(self):
        with pytest.raises(RuleSyntaxError) as exc_info:
            parse('class::name contains "a";\nclass::name contains')

        assert exc_info.value.line == 2
        assert exc_info.value.column == 21
        assert "Unexpected end of rule text" in str(exc_info.value)

    @pytest.mark.parametrize(
        "code",
        [
            'class::name notcontains "x";',
            'class::name shouldnot contains "x";',
            'class::name should notendsWith "x";',
            'classic::name contains "x";',
        ],
    )
    def test_run_together_keywords_are_rejected(self, code):
        with pytest.raises(RuleSyntaxError):
            parse(code)

    def test_double_negation_is_rejected(self):
        with pytest.raises(RuleSyntaxError):
            parse('class::name not !contains "x";')

    def test_invalid_escape_in_scope(self):
        with pytest.raises(StringLiteralError, match="incorrect string literal"):
            parse('class("\\q")::name contains "x";')

    def test_invalid_escape_in_assertion(self):
        with pytest.raises(StringLiteralError):
            parse('class::name contains "\\u{}";')


class TestParseFile:
    """Tests for parsing rule files."""

    def test_parse_fixture(self):
        rules = parse_file(rules_architecture)

        assert len(rules) == 7
        assert isinstance(rules[-1], LayerRule)
        assert all(isinstance(rule, GuardRule) for rule in rules[:-1])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "missing.guarding")
