from chakra_cli.config import LintConfig
from chakra_linter.registry import RuleRegistry


def test_defaults_without_file(tmp_path):
    config = LintConfig(tmp_path / "missing.toml")
    assert config.select == ["C"]
    assert config.ignore == []


def test_load_select_and_ignore(tmp_path):
    path = tmp_path / ".chakra-lint.toml"
    path.write_text('[tool.chakra-lint]\nselect = ["C0"]\nignore = ["C001"]\n')

    config = LintConfig(path)

    assert config.select == ["C0"]
    assert config.ignore == ["C001"]
    assert config.apply_to_registry(RuleRegistry()) == []


def test_invalid_toml_falls_back_to_defaults(tmp_path):
    path = tmp_path / ".chakra-lint.toml"
    path.write_text("[tool.chakra-lint\nselect = ")

    config = LintConfig(path)

    assert config.select == ["C"]


def test_wrong_type_falls_back_to_default(tmp_path):
    path = tmp_path / ".chakra-lint.toml"
    path.write_text('[tool.chakra-lint]\nselect = "C"\n')

    config = LintConfig(path)

    assert config.select == ["C"]
    assert [r.rule_id for r in config.apply_to_registry(RuleRegistry())] == ["C001"]
