"""Typed ABI entries and the contract descriptor"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from utils.constants import ADDRESS_PATTERN

Mutability = Literal["view", "nonpayable", "payable"]


class AbiParameter(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str
    type: str
    internal_type: str = Field(alias="internalType")
    # tuple/struct members, only present for tuple types
    components: Optional[Tuple["AbiParameter", ...]] = None


AbiParameter.model_rebuild()


class ConstructorEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    type: Literal["constructor"] = "constructor"
    inputs: Tuple[AbiParameter, ...] = ()
    state_mutability: Mutability = Field(alias="stateMutability")


class FallbackEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    type: Literal["fallback"] = "fallback"
    state_mutability: Literal["payable"] = Field("payable", alias="stateMutability")


class ReceiveEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    type: Literal["receive"] = "receive"
    state_mutability: Literal["payable"] = Field("payable", alias="stateMutability")


class FunctionEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    type: Literal["function"] = "function"
    name: str
    inputs: Tuple[AbiParameter, ...] = ()
    outputs: Tuple[AbiParameter, ...] = ()
    state_mutability: Mutability = Field(alias="stateMutability")

    @property
    def is_read_only(self) -> bool:
        return self.state_mutability == "view"


class ErrorEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["error"] = "error"
    name: str
    inputs: Tuple[AbiParameter, ...] = ()


AbiEntry = Annotated[
    Union[ConstructorEntry, FallbackEntry, ReceiveEntry, FunctionEntry, ErrorEntry],
    Field(discriminator="type"),
]


class ContractDescriptor(BaseModel):
    """Deployed address plus ABI for one network.

    Frozen: the descriptor is replaced wholesale on redeploy, never edited.
    `to_abi()` hands out plain dicts in the shape wallet libraries decode
    (`type`, `name`, `inputs`, `outputs`, `stateMutability`).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    network: str
    address: str = Field(pattern=ADDRESS_PATTERN)
    interface: Tuple[AbiEntry, ...] = Field(alias="abi")

    @model_validator(mode="after")
    def check_unique_function_names(self):
        seen = set()
        for entry in self.interface:
            if entry.type != "function":
                continue
            if entry.name in seen:
                raise ValueError(f"Duplicate function entry in ABI: {entry.name}")
            seen.add(entry.name)
        return self

    @property
    def functions(self) -> Tuple[FunctionEntry, ...]:
        return tuple(e for e in self.interface if e.type == "function")

    @property
    def errors(self) -> Tuple[ErrorEntry, ...]:
        return tuple(e for e in self.interface if e.type == "error")

    def function(self, name: str) -> FunctionEntry:
        """Look up a function entry by name (KeyError if missing)"""
        for entry in self.functions:
            if entry.name == name:
                return entry
        raise KeyError(name)

    def error(self, name: str) -> ErrorEntry:
        """Look up a custom error entry by name (KeyError if missing)"""
        for entry in self.errors:
            if entry.name == name:
                return entry
        raise KeyError(name)

    def to_abi(self) -> List[Dict[str, Any]]:
        return [entry.model_dump(mode="json", by_alias=True, exclude_none=True) for entry in self.interface]

    def to_payload(self) -> Dict[str, Any]:
        return {"address": self.address, "abi": self.to_abi()}
