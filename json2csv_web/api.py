"""HTTP surface: one endpoint converting a posted JSON document into CSV text."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import AliasChoices, BaseModel, Field

from .converter import convert
from .errors import MESSAGES, ErrorKind

logger = logging.getLogger(__name__)

app = FastAPI(title="JSON2CSV", description="Convert a JSON array of objects into CSV text.")


class JsonInputModel(BaseModel):
    """Body schema for the conversion endpoint.

    json:
        The JSON document, as text.
    separator:
        Optional cell delimiter; blank means ",".
    """

    json_text: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("json", "Json"),
        examples=['[{"id": 1, "nome": "Produto A"}]'],
    )
    separator: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("separator", "Separator"),
        examples=[";"],
    )


@app.post(
    "/Home/ConvertJsonToCsv",
    summary="Convert a JSON array of objects into CSV",
    response_class=PlainTextResponse,
    responses={400: {"description": "Validation failure; the body is the error message."}},
)
@app.post("/convert", response_class=PlainTextResponse, include_in_schema=False)
def convert_json_to_csv(model: Optional[JsonInputModel] = Body(None)):
    if model is None:
        model = JsonInputModel()

    result = convert(model.json_text, model.separator)
    if not result.ok:
        return PlainTextResponse(result.error.message, status_code=400)
    return PlainTextResponse(result.text)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.exception_handler(RequestValidationError)
async def unreadable_body_handler(request: Request, exc: RequestValidationError):
    """A body that does not bind to the input model counts as no input at all."""
    logger.info("Unreadable request body on %s: %s", request.url.path, exc.errors())
    return PlainTextResponse(MESSAGES[ErrorKind.EMPTY_INPUT], status_code=400)
