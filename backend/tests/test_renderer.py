import pytest

from services.assistant import templates
from services.assistant.renderer import (
    TemplateSyntaxError,
    compile_template,
    render,
    stringify,
)

LIST_TEMPLATE = "Items:\n{{#items}}\n• {{.}}\n{{/items}}\nDone"


def test_list_section():
    assert render(LIST_TEMPLATE, {"items": ["a", "b"]}) == "Items:\n• a\n• b\nDone"


def test_empty_list_renders_nothing():
    assert render(LIST_TEMPLATE, {"items": []}) == "Items:\nDone"
    assert render(LIST_TEMPLATE, {}) == "Items:\nDone"


def test_list_of_mappings():
    source = "{{#issues}}- {{description}} ({{severity}})\n{{/issues}}"
    data = {"issues": [
        {"description": "x", "severity": "HIGH"},
        {"description": "y", "severity": "LOW"},
    ]}
    assert render(source, data) == "- x (HIGH)\n- y (LOW)\n"


def test_outer_scope_is_visible_inside_sections():
    source = "{{#items}}{{name}}:{{label}} {{/items}}"
    data = {"label": "L", "items": [{"name": "a"}, {"name": "b"}]}
    assert render(source, data) == "a:L b:L "


def test_inner_scope_shadows_outer():
    source = "{{#items}}{{name}}{{/items}}|{{name}}"
    assert render(source, {"name": "root", "items": [{"name": "a"}]}) == "a|root"


@pytest.mark.parametrize("value", [None, False, 0, "", [], {}])
def test_falsy_sections_are_skipped(value):
    assert render("{{#v}}yes{{/v}}", {"v": value}) == ""


@pytest.mark.parametrize("value", [True, 1, "x", 0.5])
def test_truthy_scalar_renders_once(value):
    assert render("{{#v}}yes{{/v}}", {"v": value}) == "yes"


def test_mapping_section_pushes_scope():
    assert render("{{#user}}{{name}}{{/user}}", {"user": {"name": "Jane"}}) == "Jane"


def test_dotted_paths():
    data = {"user": {"name": "Jane"}}
    assert render("{{user.name}}", data) == "Jane"
    assert render("[{{user.missing.deep}}]", data) == "[]"


def test_missing_variables_render_empty():
    assert render("a{{missing}}b", {}) == "ab"
    assert render("a{{missing}}b") == "ab"


def test_tag_whitespace_is_allowed():
    assert render("{{ name }}", {"name": "x"}) == "x"


def test_nested_sections():
    source = "{{#groups}}[{{#items}}{{.}}{{/items}}]{{/groups}}"
    data = {"groups": [{"items": [1, 2]}, {"items": []}]}
    assert render(source, data) == "[12][]"


def test_standalone_tags_consume_their_line():
    assert render("  {{#a}}  \nx\n  {{/a}}\n", {"a": True}) == "x\n"


@pytest.mark.parametrize("value, text", [
    (None, ""),
    (True, "true"),
    (False, "false"),
    (80.0, "80"),
    (66.67, "66.67"),
    (7, "7"),
    (["x", "y"], "x, y"),
    ("plain", "plain"),
])
def test_stringify(value, text):
    assert stringify(value) == text


@pytest.mark.parametrize("source, message", [
    ("{{#a}}\nx\n", "Unclosed"),
    ("{{#a}}x{{/b}}", "does not close"),
    ("x{{/a}}", "Unexpected"),
])
def test_syntax_errors(source, message):
    with pytest.raises(TemplateSyntaxError, match=message):
        compile_template(source)


def test_syntax_errors_report_the_line():
    with pytest.raises(TemplateSyntaxError, match="line 2"):
        compile_template("ok\n{{#a}}\nnever closed")
    assert issubclass(TemplateSyntaxError, ValueError)


def test_templates_are_compiled_once():
    assert compile_template(LIST_TEMPLATE) is compile_template(LIST_TEMPLATE)


def _all_templates():
    yield from templates.SCORE_EXPLANATION.values()
    yield from templates.SKILLS_GAP.values()
    yield from templates.JD_MATCH.values()
    yield templates.EXPERIENCE_IMPROVE
    yield templates.KEYWORD_SUGGESTION
    yield templates.FORMATTING_FEEDBACK
    yield templates.RESUME_REWRITE
    yield templates.GENERAL


@pytest.mark.parametrize("source", list(_all_templates()))
def test_bundled_templates_compile(source):
    assert compile_template(source)
    assert "{{" not in render(source, {})
