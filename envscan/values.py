from dataclasses import dataclass
from typing import ClassVar, Dict, Literal, Union


ValueKind = Literal["string", "integer", "boolean"]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class StringValue:
    value: str
    kind: ClassVar[ValueKind] = "string"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerValue:
    value: int
    kind: ClassVar[ValueKind] = "integer"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"IntegerValue needs an int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"IntegerValue out of 64-bit range: {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanValue:
    value: bool
    kind: ClassVar[ValueKind] = "boolean"

    def __str__(self) -> str:
        return "true" if self.value else "false"


# Dataclass equality checks the class before the payload, so
# BooleanValue(True) != IntegerValue(1).
Value = Union[StringValue, IntegerValue, BooleanValue]
EnvMap = Dict[str, Value]
