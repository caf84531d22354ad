from __future__ import annotations

import json

from .display import Display

from abc import ABC, abstractmethod
from enum import Enum
from numbers import Number
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from typing import Any, List, NamedTuple, Optional, Tuple

SEVERITY_ERROR = 'error'
SEVERITY_WARNING = 'warning'

# Raised by the JSON and YAML parsers on malformed or too deeply nested input.
PARSE_ERRORS = (ValueError, RecursionError, YAMLError)

display = Display('semantic_string')


class Diagnostic(NamedTuple):
    severity: str
    summary: str
    detail: str


class ValueState(Enum):
    NULL = 'null'
    UNKNOWN = 'unknown'
    KNOWN = 'known'


class StringValuable(ABC):
    """A value that can be converted to and from the plain string Ansible
    passes around."""

    __slots__ = ()

    @abstractmethod
    def to_native(self) -> Optional[str]:
        pass


class StringValuableWithSemanticEquals(StringValuable):

    __slots__ = ()

    @abstractmethod
    def semantic_equals(self, other) -> Tuple[bool, List[Diagnostic]]:
        pass


class SemanticStringType:
    """Type tag shared by every SemanticStringValue."""

    TYPE_TAG = 'infra.aap.semantic_string'

    def value_from_native(self, value: Any) -> SemanticStringValue:
        return SemanticStringValue.from_native(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, SemanticStringType)

    def __hash__(self) -> int:
        return hash(self.TYPE_TAG)

    def __repr__(self) -> str:
        return self.TYPE_TAG


SEMANTIC_STRING_TYPE = SemanticStringType()


class SemanticStringValue(StringValuableWithSemanticEquals):
    """A string holding a JSON or YAML payload, compared by structure.

    The AAP API reformats payloads such as inventory variables before
    echoing them back. Comparing the raw text would report a change on
    every run, so semantic_equals parses both sides and compares the
    resulting trees instead. Everywhere else the value behaves like the
    plain string it wraps.
    """

    __slots__ = ('_raw', '_state')

    def __init__(self, raw: str = '', state: ValueState = ValueState.KNOWN) -> None:
        self._raw = raw if state == ValueState.KNOWN else ''
        self._state = state

    @classmethod
    def null(cls) -> SemanticStringValue:
        return cls(state=ValueState.NULL)

    @classmethod
    def unknown(cls) -> SemanticStringValue:
        return cls(state=ValueState.UNKNOWN)

    @classmethod
    def from_native(cls, value: Any) -> SemanticStringValue:
        if value is None:
            return cls.null()
        if isinstance(value, SemanticStringValue):
            return value
        if isinstance(value, (dict, list)):
            # Structured task args arrive already parsed.
            return cls(json.dumps(value))
        return cls(str(value))

    @property
    def type(self) -> SemanticStringType:
        return SEMANTIC_STRING_TYPE

    def raw_value(self) -> str:
        return self._raw

    def is_null(self) -> bool:
        return self._state == ValueState.NULL

    def is_unknown(self) -> bool:
        return self._state == ValueState.UNKNOWN

    def to_native(self) -> Optional[str]:
        if self._state != ValueState.KNOWN:
            return None
        return self._raw

    def semantic_equals(self, other) -> Tuple[bool, List[Diagnostic]]:
        if isinstance(other, str):
            other = SemanticStringValue(other)
        elif isinstance(other, StringValuable) and not isinstance(other, SemanticStringValue):
            other = SemanticStringValue.from_native(other.to_native())
        elif not isinstance(other, SemanticStringValue):
            return False, [Diagnostic(
                SEVERITY_ERROR,
                'Semantic Equality Check Error',
                'An unexpected value type was received while performing semantic '
                f'equality checks. Expected {SEMANTIC_STRING_TYPE!r}, got: '
                f'{type(other).__name__}.')]

        if self._state != ValueState.KNOWN or other._state != ValueState.KNOWN:
            return self._state == other._state, []

        if self._raw == other._raw:
            return True, []

        try:
            current = json.loads(self._raw)
            given = json.loads(other._raw)
        except (ValueError, RecursionError) as e:
            display.vvv(f"Payload is not JSON ({e}), comparing as YAML")
        else:
            return trees_equal(current, given), []

        try:
            current = load_yaml(self._raw)
            given = load_yaml(other._raw)
        except PARSE_ERRORS as e:
            display.vvv(f"Payload is not YAML either: {e}")
            return False, [unparseable_diagnostic(f'Parser error: {e}')]

        # Plain text loads as a YAML scalar, and YAML folds multi-line
        # scalars, so only mappings and sequences are comparable here.
        for document in (current, given):
            if node_kind(document) not in ('object', 'array'):
                display.vvv("Payload is not a YAML mapping or sequence")
                return False, [unparseable_diagnostic(
                    'A payload is neither a JSON document nor a YAML mapping or sequence.')]

        return trees_equal(current, given), []

    def __eq__(self, other) -> bool:
        if not isinstance(other, SemanticStringValue):
            return False
        return self._state == other._state and self._raw == other._raw

    def __hash__(self) -> int:
        return hash((SEMANTIC_STRING_TYPE.TYPE_TAG, self._state, self._raw))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        if self._state != ValueState.KNOWN:
            return f"SemanticStringValue(<{self._state.value}>)"
        return f"SemanticStringValue({self._raw!r})"


def unparseable_diagnostic(reason: str) -> Diagnostic:
    return Diagnostic(
        SEVERITY_WARNING,
        'Semantic Equality Check Skipped',
        f'The values could not be parsed as JSON or YAML and were compared as different. {reason}')


def load_yaml(text: str) -> Any:
    # YAML instances keep parser state; never share one between calls.
    return YAML(typ='safe', pure=True).load(text)


def node_kind(node: Any) -> str:
    if node is None:
        return 'null'
    if isinstance(node, bool):
        return 'bool'
    if isinstance(node, Number):
        return 'number'
    if isinstance(node, str):
        return 'string'
    if isinstance(node, dict):
        return 'object'
    if isinstance(node, (list, tuple)):
        return 'array'
    return type(node).__name__


def trees_equal(left: Any, right: Any) -> bool:
    """Deep structural comparison of two parsed payloads.

    Mapping keys are compared exactly, kind included, and in any order.
    Sequences are compared element by element in order. Numbers compare by
    value, so 1 and 1.0 are equal, but a boolean never equals a number.

    Walks an explicit stack so nesting depth is bounded by memory only.
    """
    pending = [(left, right)]
    while pending:
        left, right = pending.pop()
        kind = node_kind(left)
        if kind != node_kind(right):
            return False

        if kind == 'object':
            if mapping_keys(left) != mapping_keys(right):
                return False
            pending.extend((left[k], right[k]) for k in left)
        elif kind == 'array':
            if len(left) != len(right):
                return False
            pending.extend(zip(left, right))
        elif kind == 'number' and left != left and right != right:
            # NaN never equals itself, but the same literal on both sides is no drift.
            continue
        elif left != right:
            return False

    return True


def mapping_keys(node: dict) -> set:
    # YAML keys may be booleans or numbers; True, 1 and 1.0 hash alike.
    return {(node_kind(k), k) for k in node}


def parse_payload(text: str) -> Any:
    """Parses a single payload as JSON, falling back to YAML. Raises one of
    PARSE_ERRORS when neither format applies."""
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return load_yaml(text)
