import logging

from chakra_tree_sitter import JSXPatterns
from tree_sitter import Node

from ..classifier import classify
from ..fixes import plan_fix
from ..models import InternalIssue, Severity
from ..origin import is_chakra_element
from .base import BaseRule, RuleContext

logger = logging.getLogger(__name__)

GENERIC_COMPONENT = "Box"

MESSAGE = "'{invalid_component}' with attribute '{attribute}' could be replaced by '{valid_component}'."


class RequireSpecificComponentRule(BaseRule):
    """Enforces the usage of specific Chakra components over a styled Box."""

    @property
    def rule_id(self) -> str:
        return "C001"

    @property
    def name(self) -> str:
        return "require-specific-component"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Box used with an attribute that a more specific Chakra component provides, e.g. Flex."

    def is_eligible(self, node: Node, context: RuleContext) -> bool:
        name_node = JSXPatterns.get_tag_name(node)
        if name_node is None or context.get_text(name_node) != GENERIC_COMPONENT:
            return False
        return is_chakra_element(node, context.resolver, context.source)

    def check_element(self, node: Node, context: RuleContext) -> InternalIssue | None:
        if not self.is_eligible(node, context):
            return None

        match = classify(node, GENERIC_COMPONENT, context.source)
        if match is None:
            return None

        data = {
            "invalid_component": GENERIC_COMPONENT,
            "valid_component": match.component,
            "attribute": context.get_text(match.attribute),
        }
        logger.debug(
            "%s:%d: %s -> %s", context.file_path, node.start_point[0] + 1, GENERIC_COMPONENT, match.component
        )
        fix = plan_fix(node, match.attribute, match.component, context.source, context.resolver)
        return self._create_issue(node, context, MESSAGE.format(**data), data=data, fix=fix)
