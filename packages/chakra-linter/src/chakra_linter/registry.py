from typing import Iterable

from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: list[BaseRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        if any(r.rule_id == rule.rule_id for r in self._rules):
            raise ValueError(f"Rule {rule.rule_id} is already registered")
        self._rules.append(rule)

    def get_all_rules(self) -> list[BaseRule]:
        return list(self._rules)

    def get_rule(self, key: str) -> BaseRule | None:
        for rule in self._rules:
            if key in (rule.rule_id, rule.name):
                return rule
        return None

    def get_enabled_rules(self, select: Iterable[str], ignore: Iterable[str] = ()) -> list[BaseRule]:
        """Rules matched by a `select` entry and by no `ignore` entry.

        Entries are rule id prefixes ("C", "C001") or full rule names.
        """
        select, ignore = list(select), list(ignore)
        return [r for r in self._rules if self._matches(r, select) and not self._matches(r, ignore)]

    @staticmethod
    def _matches(rule: BaseRule, patterns: list[str]) -> bool:
        return any(rule.rule_id.startswith(p) or rule.name == p for p in patterns)

    def _load_builtin_rules(self):
        from .rules.specific_component import RequireSpecificComponentRule

        self.register(RequireSpecificComponentRule())


registry = RuleRegistry()
