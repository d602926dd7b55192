"""
Document tree handed to the PDF renderer.

The composer produces one DocumentTree per report; the renderer only reads
it. Everything here is frozen so a tree can be compared, cached or rendered
twice with identical output.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from .styles import TableLayout

Margin = tuple[float, float, float, float]  # left, top, right, bottom
Width = Union[float, Literal["auto", "*"]]


class Cell(BaseModel):
    """A table cell with layout annotations."""

    model_config = ConfigDict(frozen=True)

    text: Union[str, int]
    col_span: int = 1
    bold: bool = False
    margin: Optional[Margin] = None


CellValue = Union[Cell, bool, int, str, None]
FrozenRow = tuple[CellValue, ...]


class TextStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    font_size: float = 10
    bold: bool = False
    italics: bool = False
    underline: bool = False
    alignment: Literal["left", "center", "right"] = "left"
    margin: Margin = (0, 0, 0, 0)


class PageSetup(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: Literal["A4"] = "A4"
    orientation: Literal["portrait", "landscape"] = "portrait"
    font: str = "Helvetica"
    line_height: float = 1.15
    font_size: float = 10


class TextBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str
    style: Optional[str] = None
    font_size: Optional[float] = None  # overrides the named style


class TableBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["table"] = "table"
    widths: tuple[Width, ...]
    rows: tuple[FrozenRow, ...]
    layout: TableLayout
    margin: Margin = (0, 0, 0, 0)


Block = Union[TextBlock, TableBlock]


class DocumentTree(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: PageSetup
    styles: dict[str, TextStyle]
    content: tuple[Block, ...]
