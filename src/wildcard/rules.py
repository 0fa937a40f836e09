"""Ordered include/exclude pattern rules.

A PatternRules set decides whether a string is selected by walking its rules
in order; the first rule with a matching pattern wins.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable
from typing import Literal as _Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from wildcard.config import Config
from wildcard.errors import PatternRuleError
from wildcard.matcher import WildcardPattern, compile

__all__ = ["PatternRule", "PatternRules"]

_EFFECTS = ("include", "exclude")


@dataclass
class PatternRule:
    """A single selection rule.

    Attributes:
        patterns: Wildcard patterns; the rule applies if any of them matches.
        effect: 'include' or 'exclude'.
        description: Free text shown in debug logs.
        ignore_case: Per-rule case mode. None uses the rule set's default.
    """

    patterns: list[str]
    effect: str
    description: str = ""
    ignore_case: bool | None = None


class _RuleModel(BaseModel):
    """Schema for one rule entry in a YAML rule file."""

    model_config = ConfigDict(extra="forbid")

    patterns: list[str]
    effect: _Literal["include", "exclude"]
    description: str = ""
    ignore_case: bool | None = None


class PatternRules:
    """First-match-wins evaluation of include/exclude pattern rules.

    Thread safety:
        Internally synchronized. check, select, add_rule, remove_rule and
        reload are safe to call concurrently.
    """

    def __init__(
        self,
        rules: list[PatternRule],
        default_effect: str = "exclude",
        ignore_case: bool = False,
    ) -> None:
        """Initialize with ordered rules and a default effect.

        Args:
            rules: Ordered list of rules (first match wins).
            default_effect: Effect when no rule matches ('include' or 'exclude').
            ignore_case: Case mode for rules that do not set their own.

        Raises:
            PatternRuleError: If an effect is not 'include' or 'exclude'.
        """
        if default_effect not in _EFFECTS:
            raise PatternRuleError(
                f"Invalid default_effect '{default_effect}', must be 'include' or 'exclude'"
            )
        self._default_effect = default_effect
        self._ignore_case = ignore_case
        self._entries: list[tuple[PatternRule, list[WildcardPattern]]] = [
            self._compile(rule) for rule in rules
        ]
        self._yaml_path: str | None = None
        self._logger = logging.getLogger("wildcard.rules")
        self._lock = threading.Lock()

    def _compile(self, rule: PatternRule) -> tuple[PatternRule, list[WildcardPattern]]:
        if rule.effect not in _EFFECTS:
            raise PatternRuleError(
                f"Invalid effect '{rule.effect}', must be 'include' or 'exclude'",
                details={"patterns": rule.patterns},
            )
        ignore_case = self._ignore_case if rule.ignore_case is None else rule.ignore_case
        return rule, [compile(p, ignore_case) for p in rule.patterns]

    @property
    def rules(self) -> list[PatternRule]:
        with self._lock:
            return [rule for rule, _ in self._entries]

    @property
    def default_effect(self) -> str:
        return self._default_effect

    @classmethod
    def from_config(cls, config: Config) -> PatternRules:
        """Build a rule set from a Config holding 'rules', 'default_effect' and 'ignore_case'.

        Raises:
            PatternRuleError: If the configuration is structurally invalid.
        """
        if "rules" not in config:
            raise PatternRuleError("Pattern rule config missing required 'rules' key")

        raw_rules = config.get("rules")
        if not isinstance(raw_rules, list):
            raise PatternRuleError(
                f"'rules' must be a list, got {type(raw_rules).__name__}"
            )

        ignore_case = config.get("ignore_case", False)
        if not isinstance(ignore_case, bool):
            raise PatternRuleError(
                f"'ignore_case' must be a boolean, got {type(ignore_case).__name__}"
            )

        rules: list[PatternRule] = []
        for i, raw_rule in enumerate(raw_rules):
            if not isinstance(raw_rule, dict):
                raise PatternRuleError(
                    f"Rule {i} must be a mapping, got {type(raw_rule).__name__}"
                )
            try:
                parsed = _RuleModel.model_validate(raw_rule)
            except ValidationError as e:
                raise PatternRuleError(
                    f"Rule {i} is invalid: {e}",
                    details={"rule_index": i, "errors": e.errors()},
                    cause=e,
                ) from e
            rules.append(
                PatternRule(
                    patterns=parsed.patterns,
                    effect=parsed.effect,
                    description=parsed.description,
                    ignore_case=parsed.ignore_case,
                )
            )

        return cls(
            rules=rules,
            default_effect=config.get("default_effect", "exclude"),
            ignore_case=ignore_case,
        )

    @classmethod
    def load(cls, yaml_path: str) -> PatternRules:
        """Load a rule set from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
            PatternRuleError: If the rules are structurally invalid.
        """
        rules = cls.from_config(Config.load(yaml_path))
        rules._yaml_path = yaml_path
        return rules

    def check(self, target: str | None) -> bool:
        """Return whether target is selected by the rule set."""
        with self._lock:
            entries = list(self._entries)
            default_effect = self._default_effect

        for rule, patterns in entries:
            if any(p.match(target) for p in patterns):
                self._logger.debug(
                    "Rule check: target=%s decision=%s rule=%s",
                    target,
                    rule.effect,
                    rule.description or "(no description)",
                )
                return rule.effect == "include"

        self._logger.debug(
            "Rule check: target=%s decision=%s rule=default",
            target,
            default_effect,
        )
        return default_effect == "include"

    def select(self, targets: Iterable[str]) -> list[str]:
        """Return the selected targets, in their original order."""
        return [t for t in targets if self.check(t)]

    def add_rule(self, rule: PatternRule) -> None:
        """Add a rule at position 0 (highest priority)."""
        entry = self._compile(rule)
        with self._lock:
            self._entries.insert(0, entry)

    def remove_rule(self, patterns: list[str]) -> bool:
        """Remove the first rule with exactly these patterns.

        Returns:
            True if a rule was found and removed, False otherwise.
        """
        with self._lock:
            for i, (rule, _) in enumerate(self._entries):
                if rule.patterns == patterns:
                    self._entries.pop(i)
                    return True
            return False

    def reload(self) -> None:
        """Re-read the rules from the original YAML file.

        Raises:
            PatternRuleError: If the rule set was not created by load().
        """
        with self._lock:
            yaml_path = self._yaml_path
        if yaml_path is None:
            raise PatternRuleError("Cannot reload: rules were not loaded from a YAML file")
        reloaded = PatternRules.load(yaml_path)
        with self._lock:
            self._entries = reloaded._entries
            self._default_effect = reloaded._default_effect
            self._ignore_case = reloaded._ignore_case
