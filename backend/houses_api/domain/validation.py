# backend/houses_api/domain/validation.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

Predicate = Callable[[Any], bool]

# storage integers are signed 64-bit
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Rule:
    check: Predicate
    message: str


# field name (python attribute) -> ordered rules
RuleTable = Mapping[str, Sequence[Rule]]


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    violations: dict[str, list[str]] = field(default_factory=dict)


# -------------------- predicates --------------------
# Presence is the job of `required`; every other predicate passes on None so an
# absent optional field is never reported twice.

def _present(v: Any) -> bool:
    return v is not None


def _not_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and bool(v.strip()))


def _positive(v: Any) -> bool:
    return v is None or (isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0)


def required(message: str = "The field is required.") -> Rule:
    return Rule(_present, message)


def not_blank(message: str = "The field must not be blank.") -> Rule:
    return Rule(_not_blank, message)


def positive(message: str = "The field must be greater than 0.") -> Rule:
    return Rule(_positive, message)


def at_most(n: int, message: Optional[str] = None) -> Rule:
    def _check(v: Any) -> bool:
        return v is None or not isinstance(v, (int, float)) or v <= n

    return Rule(_check, message or f"The field must be at most {n}.")


def max_length(n: int, message: Optional[str] = None) -> Rule:
    def _check(v: Any) -> bool:
        return v is None or len(str(v)) <= n

    return Rule(_check, message or f"The field must be at most {n} characters long.")


# -------------------- engine --------------------

def _wire_name(dto_type: type[BaseModel], name: str) -> str:
    info = dto_type.model_fields.get(name)
    if info is not None and info.alias:
        return info.alias
    return name


def validate(dto: Optional[BaseModel], rules: RuleTable, dto_type: Optional[type[BaseModel]] = None) -> ValidationResult:
    """
    Evaluate every rule on every field and report all violations at once.

    - `dto` may be None (absent payload); it is treated as an instance with
      every field unset, so required-field rules fire as usual.
    - Keys of `violations` follow the DTO's declared field order and use the
      wire (alias) name; messages keep rule order.
    """
    model = dto_type or (type(dto) if dto is not None else None)
    if model is None:
        raise TypeError("validate() needs dto_type when dto is None")

    values: dict[str, Any] = dto.model_dump() if dto is not None else {}

    violations: dict[str, list[str]] = {}
    ordered = [n for n in model.model_fields if n in rules]
    ordered += [n for n in rules if n not in model.model_fields]

    for name in ordered:
        value = values.get(name)
        failed = [r.message for r in rules[name] if not r.check(value)]
        if failed:
            violations[_wire_name(model, name)] = failed

    return ValidationResult(valid=not violations, violations=violations)


def _field_of(dto_type: type[BaseModel], loc: tuple) -> Optional[str]:
    if not loc:
        return None
    head = str(loc[0])
    for name, info in dto_type.model_fields.items():
        if head in (name, info.alias):
            return name
    return None


def validate_payload(
    dto_type: type[BaseModel],
    payload: Union[Mapping[str, Any], BaseModel, None],
    rules: RuleTable,
) -> tuple[Optional[BaseModel], ValidationResult]:
    """
    Parse a raw request body into `dto_type` and run `rules` on it.

    A field whose JSON value has the wrong type is reported with the parser's
    message instead of its rule messages; every other field still goes through
    its rules, so one response lists every problem. The parsed DTO is returned
    only when the result is valid.
    """
    if payload is None or isinstance(payload, dto_type):
        result = validate(payload, rules, dto_type)
        return (payload if result.valid else None), result

    try:
        dto = dto_type.model_validate(payload)
    except ValidationError as exc:
        type_errors: dict[str, list[str]] = {}
        for err in exc.errors():
            name = _field_of(dto_type, tuple(err.get("loc", ())))
            key = _wire_name(dto_type, name) if name else "body"
            type_errors.setdefault(key, []).append(str(err.get("msg", "invalid value")))

        if not isinstance(payload, Mapping):
            return None, ValidationResult(valid=False, violations=type_errors)

        bad = set(type_errors)
        bad |= {n for n in dto_type.model_fields if _wire_name(dto_type, n) in bad}
        rest = dto_type.model_validate({k: v for k, v in payload.items() if k not in bad})
        ruled = validate(rest, rules, dto_type)

        violations: dict[str, list[str]] = {}
        for name in dto_type.model_fields:
            wire = _wire_name(dto_type, name)
            messages = type_errors.pop(wire, None) or ruled.violations.get(wire)
            if messages:
                violations[wire] = messages
        violations.update(type_errors)
        return None, ValidationResult(valid=False, violations=violations)

    result = validate(dto, rules, dto_type)
    return (dto if result.valid else None), result
