from pathlib import Path

import pytest
from chakra_linter.autofix import AutoFixEngine
from chakra_linter.engine import LinterEngine
from chakra_linter.errors import OverlappingEditsError
from chakra_linter.models import Fix, InternalIssue, Severity, TextEdit


def _issue(line, *edits):
    return InternalIssue(
        file_path=Path("a.tsx"),
        line=line,
        rule_id="C001",
        message="",
        severity=Severity.ERROR,
        auto_fixable=True,
        fix=Fix(edits=edits),
    )


def test_fix_sorts_edits():
    fix = Fix(edits=(TextEdit(5, 6, "x"), TextEdit(0, 1, "y")))
    assert [e.start for e in fix.edits] == [0, 5]


def test_fix_rejects_overlapping_edits():
    with pytest.raises(OverlappingEditsError):
        Fix(edits=(TextEdit(0, 4, "x"), TextEdit(2, 6, "y")))


def test_fix_rejects_two_insertions_at_same_offset():
    with pytest.raises(OverlappingEditsError):
        Fix(edits=(TextEdit(3, 3, "x"), TextEdit(3, 3, "y")))


def test_adjacent_edits_do_not_overlap():
    fix = Fix(edits=(TextEdit(0, 3, "Flex"), TextEdit(3, 10, "")))
    assert fix.apply(b"Box attr=1>").decode() == "Flex>"


def test_invalid_range():
    with pytest.raises(ValueError):
        TextEdit(5, 2)


def test_apply_fixes_defers_conflicting_fix():
    source = "abcdef"
    first = _issue(1, TextEdit(0, 2, "X"))
    second = _issue(1, TextEdit(1, 3, "Y"))
    third = _issue(1, TextEdit(4, 5, "Z"))

    outcome = AutoFixEngine().apply_fixes(source, [second, third, first])

    assert outcome.source == "XcdZf"
    assert outcome.applied == [first, third]
    assert outcome.deferred == [second]


def test_apply_fixes_without_fixes_keeps_source():
    outcome = AutoFixEngine().apply_fixes("abc", [])
    assert outcome.source == "abc"
    assert not outcome.modified


def test_fix_string_end_to_end():
    code = 'import { Box } from "@chakra-ui/react";\n\nexport const App = () => <Box display="flex">hello</Box>;\n'

    report = LinterEngine().fix_string(code)

    assert report.source == (
        'import { Box, Flex } from "@chakra-ui/react";\n\nexport const App = () => <Flex>hello</Flex>;\n'
    )
    assert report.issues == []
    assert report.fixed == 1


def test_fix_string_shared_import_is_inserted_once():
    code = """import { Box } from "@chakra-ui/react";

export const App = () => (
  <Box display="flex">
    <Box display="flex" />
  </Box>
);
"""
    report = LinterEngine().fix_string(code)

    assert report.source == """import { Box, Flex } from "@chakra-ui/react";

export const App = () => (
  <Flex>
    <Flex />
  </Flex>
);
"""
    assert report.fixed == 2
    assert report.passes == 3


def test_fix_string_multi_line_import_and_attributes():
    code = """import {
  Box,
  Text,
} from "@chakra-ui/react";

export const App = () => (
  <Box
    p={4}
    display="grid"
    gap={2}
  >
    <Text>hi</Text>
  </Box>
);
"""
    report = LinterEngine().fix_string(code)

    assert report.source == """import {
  Box,
  Text,
  Grid,
} from "@chakra-ui/react";

export const App = () => (
  <Grid
    p={4}
    gap={2}
  >
    <Text>hi</Text>
  </Grid>
);
"""


def test_fix_is_idempotent():
    code = 'import { Box } from "@chakra-ui/react";\nconst a = <Box display="flex" p={1}>x</Box>;\n'
    engine = LinterEngine()

    once = engine.fix_string(code).source
    twice = engine.fix_string(once)

    assert twice.source == once
    assert not twice.modified
    assert once.count("Flex }") == 1


def test_fix_file_writes_changes(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text('import { Box } from "@chakra-ui/react";\nconst a = <Box as="button" />;\n')

    report = LinterEngine().fix_file(file_path)

    assert report.modified
    assert file_path.read_text() == 'import { Box, Button } from "@chakra-ui/react";\nconst a = <Button />;\n'
