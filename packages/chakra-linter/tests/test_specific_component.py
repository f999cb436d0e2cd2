from pathlib import Path

import pytest
from chakra_linter.engine import LinterEngine
from chakra_linter.models import Severity
from chakra_linter.rules.specific_component import RequireSpecificComponentRule


@pytest.fixture
def engine():
    return LinterEngine(rules=[RequireSpecificComponentRule()])


def test_box_with_display_flex(engine):
    code = 'import { Box } from "@chakra-ui/react";\n\nexport const App = () => <Box display="flex">hello</Box>;\n'

    issues = engine.analyze_string(code, Path("App.tsx"))

    assert len(issues) == 1
    issue = issues[0]
    assert issue.rule_id == "C001"
    assert issue.context == "require-specific-component"
    assert issue.severity == Severity.ERROR
    assert issue.file_path == Path("App.tsx")
    assert (issue.line, issue.column) == (3, 26)
    assert issue.message == "'Box' with attribute 'display=\"flex\"' could be replaced by 'Flex'."
    assert issue.data == {"invalid_component": "Box", "valid_component": "Flex", "attribute": 'display="flex"'}
    assert issue.auto_fixable
    assert issue.fix is not None


def test_first_matching_attribute_wins(engine):
    code = 'import { Box } from "@chakra-ui/react";\nconst a = <Box as="button" display="flex" />;'

    issues = engine.analyze_string(code)

    assert len(issues) == 1
    assert issues[0].data["valid_component"] == "Button"
    assert issues[0].data["attribute"] == 'as="button"'


def test_locally_declared_box_is_ignored(engine):
    code = """
const Box = (props) => <div {...props} />;

export const App = () => <Box sx={{ m: 1 }} display="flex" />;
"""
    assert engine.analyze_string(code) == []


@pytest.mark.parametrize(
    "code",
    [
        # other library
        'import { Box } from "@mui/material";\nconst a = <Box display="flex" />;',
        # tracked library, other component
        'import { Stack } from "@chakra-ui/react";\nconst a = <Stack display="flex" />;',
        # renamed import
        'import { Box as B } from "@chakra-ui/react";\nconst a = <B display="flex" />;',
        # no matching attribute
        'import { Box } from "@chakra-ui/react";\nconst a = <Box display="block" p={4} />;',
        # computed value
        'import { Box } from "@chakra-ui/react";\nconst a = <Box display={mode} />;',
        # shadowed inside a function
        'import { Box } from "@chakra-ui/react";\nfunction A({ Box }) { return <Box display="flex" />; }',
        # shadowed by a loop variable
        'import { Box } from "@chakra-ui/react";\nfor (const Box of comps) { render(<Box display="flex" />); }',
        'import { Box } from "@chakra-ui/react";\nfor (let Box in comps) { render(<Box display="flex" />); }',
        # shadowed by the name of a function or class expression
        'import { Box } from "@chakra-ui/react";\nconst F = function Box() { return <Box display="flex" />; };',
        'import { Box } from "@chakra-ui/react";\nconst C = class Box { render() { return <Box display="flex" />; } };',
    ],
)
def test_not_applicable(engine, code):
    assert engine.analyze_string(code) == []


def test_deeply_nested_expression(engine):
    chain = " + ".join(["'a'"] * 1500)
    code = f'import {{ Box }} from "@chakra-ui/react";\nconst s = {chain};\nconst a = <Box display="flex" />;\n'

    issues = engine.analyze_string(code)

    assert [issue.data["valid_component"] for issue in issues] == ["Flex"]
    assert issues[0].line == 3


def test_one_issue_per_element_in_document_order(engine):
    code = """import { Box } from "@chakra-ui/react";

const a = (
  <Box display="flex">
    <Box as="p">text</Box>
    <Box display="grid" />
  </Box>
);
"""
    issues = engine.analyze_string(code)

    assert [(i.line, i.data["valid_component"]) for i in issues] == [(4, "Flex"), (5, "Text"), (6, "Grid")]


def test_rule_metadata():
    rule = RequireSpecificComponentRule()
    assert rule.name == "require-specific-component"
    assert rule.auto_fixable
    assert rule.description
