from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    RootModel,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)
from typing import Annotated, List, Optional, Union
import logging

logger = logging.getLogger(__name__)

# Probe order matters: a JSON integer is also a valid float, so int must win
Value = Annotated[
    Union[StrictBool, StrictInt, StrictFloat, StrictStr],
    Field(union_mode="left_to_right"),
]

Power = Annotated[Union[StrictBool, StrictFloat], Field(union_mode="left_to_right")]


def as_int(value) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def as_float(value) -> float:
    if isinstance(value, float):
        return value
    return 0.0


def as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return False


def as_str(value) -> str:
    if isinstance(value, str):
        return value
    return ""


class OpaqueJSON(RootModel[JsonValue]):
    """Any JSON value whose shape the hub does not pin down (view layouts etc.)"""

    @property
    def value(self):
        return self.root


class HC3Model(BaseModel):
    """Base for hub DTOs.

    Optional fields that are missing or fail to validate decode to None, so a
    firmware that changes the type of one property does not break the whole
    record. Required (identity) fields still fail the decode.
    """
    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _absent_when_unparseable(cls, value, handler, info):
        try:
            return handler(value)
        except ValidationError as e:
            if cls.model_fields[info.field_name].is_required():
                raise
            logger.debug(f"Dropping {cls.__name__}.{info.field_name}: {e.errors()[0]['msg']}")
            return None

    def to_json(self) -> str:
        # Only emit fields that were present in the source payload
        return self.model_dump_json(exclude_unset=True)


class Icon(HC3Model):
    path: Optional[StrictStr] = None
    source: Optional[StrictStr] = None
    overlay: Optional[StrictStr] = None


class FavoritePosition(HC3Model):
    name: Optional[StrictStr] = None
    label: Optional[StrictStr] = None
    value: Optional[StrictInt] = None


class UICallback(HC3Model):
    callback: Optional[StrictStr] = None
    eventType: Optional[StrictStr] = None
    name: Optional[StrictStr] = None


class DeviceParameter(HC3Model):
    id: Optional[StrictInt] = None
    size: Optional[StrictInt] = None
    value: Optional[StrictInt] = None
    lastReportedValue: Optional[StrictInt] = None
    lastSetValue: Optional[StrictInt] = None
    readOnly: Optional[StrictBool] = None
    setDefault: Optional[StrictBool] = None


class CentralSceneSupport(HC3Model):
    keyAttributes: Optional[List[StrictStr]] = None
    keyId: Optional[StrictInt] = None


class QuickAppVariable(HC3Model):
    name: StrictStr
    value: Optional[OpaqueJSON] = None

    def __eq__(self, other):
        if not isinstance(other, QuickAppVariable):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)
