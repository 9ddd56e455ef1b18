from typing import Annotated, Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from edict import __version__
from edict.parsing import Annotation
from edict.services.entry_parser import EntryParserService


class LineRequest(BaseModel):
    line: str = Field(..., description="One EDICT2 line without the line terminator.")


class BatchRequest(BaseModel):
    lines: List[str] = Field(default_factory=list)
    known_bad_lines: Optional[List[Annotated[int, Field(gt=0)]]] = Field(
        default=None,
        description="Line numbers to skip on failure. Defaults to the configured skip list.",
    )


class AnnotationItem(BaseModel):
    code: str
    kind: str
    description: str


app = FastAPI(
    title="EDICT2 parser API",
    description="Parses EDICT2 dictionary lines into structured records",
    version=__version__,
)


def get_service() -> EntryParserService:
    return EntryParserService()


ParserService = Annotated[EntryParserService, Depends(get_service)]


@app.post("/parse/line")
def parse_line(payload: LineRequest, service: ParserService) -> Dict[str, Any]:
    result = service.parse_line(payload.line)
    if not result.success:
        raise HTTPException(
            status_code=422,
            detail=result.to_dict(),
        )
    return result.to_dict()


@app.post("/parse/batch")
def parse_batch(payload: BatchRequest, service: ParserService) -> Dict[str, Any]:
    known_bad_lines = None
    if payload.known_bad_lines is not None:
        known_bad_lines = frozenset(payload.known_bad_lines)
    result = service.parse_batch(payload.lines, known_bad_lines=known_bad_lines)
    return result.to_dict()


@app.get("/annotations", response_model=List[AnnotationItem])
def list_annotations() -> List[AnnotationItem]:
    return [
        AnnotationItem(
            code=annotation.code,
            kind=annotation.kind.value,
            description=annotation.description,
        )
        for annotation in Annotation
    ]
