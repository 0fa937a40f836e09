"""wildcard - Glob-style '*' and '?' string matching."""

from __future__ import annotations

# Core
from wildcard.types import WILDCARD, Literal, Segment, SegmentSequence, Wildcard
from wildcard.parser import parse_pattern
from wildcard.matcher import WildcardPattern, compile, filter, match_found, match_pattern

# Rules
from wildcard.rules import PatternRule, PatternRules

# Config
from wildcard.config import Config

# Errors
from wildcard.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    PatternRuleError,
    WildcardError,
)

# Observability
from wildcard.observability import (
    InMemorySink,
    LoggingSink,
    MatchEvent,
    StdoutSink,
    TraceSink,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "parse_pattern",
    "match_found",
    "match_pattern",
    "compile",
    "filter",
    "WildcardPattern",
    # Segment types
    "Literal",
    "Wildcard",
    "WILDCARD",
    "Segment",
    "SegmentSequence",
    # Rules
    "PatternRule",
    "PatternRules",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "WildcardError",
    "ConfigError",
    "ConfigNotFoundError",
    "PatternRuleError",
    # Observability
    "MatchEvent",
    "TraceSink",
    "InMemorySink",
    "StdoutSink",
    "LoggingSink",
]
