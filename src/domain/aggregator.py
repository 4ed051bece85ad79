"""
Error aggregation - Collects field errors without short-circuiting.

ErrorAggregator is the mutable collector used during one registration
attempt. ValidationErrorReport is the immutable snapshot it produces.
"""

from collections.abc import Iterable, Iterator, Mapping

from .errors import ErrorCode, Field
from .results import FieldResult, Invalid

_FIELD_ORDER = {f: i for i, f in enumerate(Field)}


class ValidationErrorReport(Mapping[Field, tuple[ErrorCode, ...]]):
    """
    Immutable mapping of field -> non-empty tuple of error codes.

    Keys iterate in Field declaration order regardless of the order
    errors were added. An empty report is falsy.
    """

    def __init__(self, errors: Mapping[Field, Iterable[ErrorCode]] | None = None) -> None:
        collected = {}
        for f, codes in (errors or {}).items():
            codes = tuple(codes)
            if codes:
                collected[Field(f)] = codes
        self._errors = {f: collected[f] for f in sorted(collected, key=_FIELD_ORDER.__getitem__)}

    def __getitem__(self, key: Field) -> tuple[ErrorCode, ...]:
        return self._errors[key]

    def __iter__(self) -> Iterator[Field]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        inner = ", ".join(f"{f.value}={[c.value for c in codes]}" for f, codes in self._errors.items())
        return f"ValidationErrorReport({inner})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidationErrorReport):
            return self._errors == other._errors
        return super().__eq__(other)

    def as_dict(self) -> dict[str, list[str]]:
        """Plain JSON-ready form: {"name": ["TOO_SHORT", ...], ...}."""
        return {f.value: [c.value for c in codes] for f, codes in self._errors.items()}


class ErrorAggregator:
    """Accumulates per-field error codes, preserving order within a field."""

    def __init__(self) -> None:
        self._errors: dict[Field, list[ErrorCode]] = {}

    def add(self, field: Field, codes: Iterable[ErrorCode]) -> None:
        """Append codes under ``field``. Duplicate codes are ignored."""
        bucket = self._errors.setdefault(field, [])
        for code in codes:
            if code not in bucket:
                bucket.append(code)
        if not bucket:
            del self._errors[field]

    def collect(self, field: Field, result: FieldResult) -> None:
        """Record the errors of a failed field result. Valid results add nothing."""
        if isinstance(result, Invalid):
            self.add(field, result.errors)

    def has_errors(self, field: Field | None = None) -> bool:
        if field is None:
            return bool(self._errors)
        return field in self._errors

    def report(self) -> ValidationErrorReport:
        return ValidationErrorReport(self._errors)
