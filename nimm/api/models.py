from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from nimm.core.events import KeyEvent, ResizeEvent


class KeyMessage(BaseModel):
    type: Literal["key"]
    key: str = Field(..., min_length=1, max_length=32)

    def to_event(self) -> KeyEvent:
        return KeyEvent(key=self.key)


class ResizeMessage(BaseModel):
    type: Literal["resize"]
    width: int = Field(..., ge=0, le=10_000)
    height: int = Field(..., ge=0, le=10_000)

    def to_event(self) -> ResizeEvent:
        return ResizeEvent(width=self.width, height=self.height)


ClientMessage = Annotated[KeyMessage | ResizeMessage, Field(discriminator="type")]

client_message_adapter: TypeAdapter[KeyMessage | ResizeMessage] = TypeAdapter(ClientMessage)


class FrameMessage(BaseModel):
    type: Literal["frame"] = "frame"
    frame: str


class ByeMessage(BaseModel):
    type: Literal["bye"] = "bye"


class FatalMessage(BaseModel):
    type: Literal["fatal"] = "fatal"
    message: str


class InfoResponse(BaseModel):
    name: str
    version: str
