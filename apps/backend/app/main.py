"""FastAPI application exposing the flipdoc conversions over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from flipdoc import (
    ConversionResult,
    FlipDocError,
    InvalidInputError,
    UnsupportedFormatError,
    convert_image,
    convert_text,
    convert_word,
)
from flipdoc.config import load_settings

LOGGER = logging.getLogger("flipdoc.backend")

EXPOSED_HEADERS = [
    "Content-Disposition",
    "X-FlipDoc-Page-Count",
    "X-FlipDoc-Line-Count",
    "X-FlipDoc-Error-Rule",
]

settings = load_settings()

app = FastAPI(title="FlipDoc API", version="0.1.0")
app.state.settings = settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
    expose_headers=EXPOSED_HEADERS,
)

ROUTES = {
    "POST /text-to-pdf": "Convert text to PDF",
    "POST /image-to-pdf": "Convert an image (JPG/PNG) to PDF",
    "POST /word-to-pdf": "Convert a Word document (.doc, .docx) to PDF",
}


class TextConversionRequest(BaseModel):
    """JSON body accepted by ``POST /text-to-pdf``."""

    text: Any = None


async def _read_upload(request: Request, upload: UploadFile | None, *, missing: str) -> bytes:
    """Read ``upload`` into memory, enforcing presence and the size limit."""

    if upload is None:
        raise HTTPException(status_code=400, detail=missing)

    limit = request.app.state.settings.max_upload_bytes
    contents = await upload.read(limit + 1)
    if not contents:
        raise HTTPException(status_code=400, detail=f"File '{upload.filename}' is empty.")
    if len(contents) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"File '{upload.filename}' exceeds the {limit} byte upload limit.",
        )
    return contents


async def _convert(func: Callable[..., ConversionResult], *args: Any) -> ConversionResult:
    """Run a conversion off the event loop and map its errors onto HTTP responses."""

    try:
        return await run_in_threadpool(func, *args)
    except (InvalidInputError, UnsupportedFormatError) as exc:
        LOGGER.warning("Rejected %s request (%s): %s", func.__name__, exc.rule, exc)
        raise HTTPException(
            status_code=400,
            detail=str(exc),
            headers={"X-FlipDoc-Error-Rule": exc.rule},
        ) from exc
    except FlipDocError as exc:
        LOGGER.error("Conversion %s failed (%s): %s", func.__name__, exc.rule, exc)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate PDF: {exc}",
            headers={"X-FlipDoc-Error-Rule": exc.rule},
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive conversion to HTTP error
        LOGGER.exception("Unexpected failure in %s", func.__name__)
        raise HTTPException(status_code=500, detail="Failed to generate PDF.") from exc


def _pdf_response(result: ConversionResult) -> Response:
    headers = {
        "Content-Disposition": f'attachment; filename="{result.filename}"',
        "X-FlipDoc-Page-Count": str(result.page_count),
        "X-FlipDoc-Line-Count": str(result.line_count),
    }
    return Response(content=result.content, media_type="application/pdf", headers=headers)


@app.get("/", response_class=JSONResponse)
async def status() -> dict[str, object]:
    """Describe the service and the available conversion routes."""
    return {"status": "online", "message": "FlipDoc server is online", "routes": ROUTES}


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.post("/text-to-pdf", summary="Convert text to PDF")
async def text_to_pdf(payload: TextConversionRequest | None = None) -> Response:
    """Lay out the submitted text on A4 pages and return the PDF."""

    text = payload.text if payload is not None else None
    result = await _convert(convert_text, text)
    return _pdf_response(result)


@app.post("/image-to-pdf", summary="Convert an image to PDF")
async def image_to_pdf(
    request: Request,
    image: UploadFile | None = File(None, description="JPG or PNG image to convert."),
) -> Response:
    """Place the uploaded image on a single page sized to fit within A4."""

    contents = await _read_upload(request, image, missing="An image file is required.")
    result = await _convert(convert_image, contents, image.content_type)
    return _pdf_response(result)


@app.post("/word-to-pdf", summary="Convert a Word document to PDF")
async def word_to_pdf(
    request: Request,
    document: UploadFile | None = File(None, description="Word document (.doc or .docx)."),
) -> Response:
    """Extract the document's text and lay it out on A4 pages."""

    contents = await _read_upload(request, document, missing="A Word document is required.")
    result = await _convert(convert_word, contents, document.filename)
    return _pdf_response(result)


__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    from flipdoc.utils import configure_logging

    configure_logging(settings.log_level)
    LOGGER.info("FlipDoc server listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
