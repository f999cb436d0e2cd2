from .base import BaseRule, RuleContext
from .specific_component import RequireSpecificComponentRule

__all__ = ["BaseRule", "RequireSpecificComponentRule", "RuleContext"]
