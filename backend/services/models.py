from enum import IntEnum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Payload entities are strict: a number where text is expected is rejected,
# never converted. Aliases keep the payload's camelCase key names.
_PAYLOAD = ConfigDict(frozen=True, strict=True, populate_by_name=True)

# A read flag is either a plain yes/no or the date the item was read.
ReadFlag = Union[bool, str, None]


class PartyType(IntEnum):
    EXTERNAL = 1
    INTERNAL = 2


class ReportHeader(BaseModel):
    model_config = _PAYLOAD

    title: str
    ref_number: str = Field(alias="refNumber")
    sent: str
    sender: str
    subject: str
    function: str = ""  # jabatan, memo reports only

    @field_validator("function", mode="before")
    @classmethod
    def _blank_function(cls, value):
        return "" if value is None else value


class TrackingBlock(BaseModel):
    model_config = _PAYLOAD

    document_id: Union[int, str] = Field("", alias="id")
    received: str
    deadline: str
    archive: Union[bool, str] = ""
    agenda: Union[int, str]
    filename: str
    archive_code: str = Field("", alias="archiveCode")


class PartyRecord(BaseModel):
    model_config = _PAYLOAD

    date: str
    name: str
    type: int
    read: ReadFlag = None


class DispositionRecord(BaseModel):
    model_config = _PAYLOAD

    name: str
    note: str
    date: str


class FollowupRecord(BaseModel):
    model_config = _PAYLOAD

    name: str
    date: str
    read: ReadFlag = None
    note: str = ""


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    header: ReportHeader
    tracking: Optional[TrackingBlock] = None
    expeditions: tuple[PartyRecord, ...] = ()
    dispositions: tuple[DispositionRecord, ...] = ()
    followups: tuple[FollowupRecord, ...] = ()
