import pytest
from chakra_linter.classifier import classify, find_specific_component, literal_value
from chakra_tree_sitter import ASTWalker, JSXPatterns, TSXParser


@pytest.mark.parametrize(
    "value_text, expected",
    [
        ('"flex"', "flex"),
        ("'flex'", "flex"),
        ('{"flex"}', "flex"),
        ("{ 'flex' }", "flex"),
        ("{`flex`}", "flex"),
        ("{`${kind}`}", None),
        ("{display}", None),
        ("{4}", None),
    ],
)
def test_literal_value(value_text, expected):
    assert literal_value(value_text) == expected


def test_find_specific_component():
    assert find_specific_component("Box", "display", '"flex"') == "Flex"
    assert find_specific_component("Box", "display", '"grid"') == "Grid"
    assert find_specific_component("Box", "as", '"button"') == "Button"
    assert find_specific_component("Box", "as", '"h3"') == "Heading"


def test_find_specific_component_no_match():
    assert find_specific_component("Box", "display", '"block"') is None
    assert find_specific_component("Box", "displays", '"flex"') is None
    assert find_specific_component("Stack", "display", '"flex"') is None
    assert find_specific_component("Box", "display", "{value}") is None


def _tag(code):
    result = TSXParser().parse_string(code)
    return JSXPatterns.find_jsx_tags(result.tree.root_node)[0], result.source


def test_classify_returns_first_matching_attribute():
    tag, source = _tag('const a = <Box p={4} as="button" display="flex" />;')

    match = classify(tag, "Box", source)
    assert match.component == "Button"
    assert ASTWalker.get_text(match.attribute, source) == 'as="button"'


def test_classify_skips_spread_and_boolean_attributes():
    tag, source = _tag('const a = <Box {...props} hidden display="grid" />;')

    match = classify(tag, "Box", source)
    assert match.component == "Grid"


def test_classify_no_match():
    tag, source = _tag('const a = <Box display="block" sx={{ m: 1 }} />;')

    assert classify(tag, "Box", source) is None
