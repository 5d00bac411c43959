"""FastAPI application setup for the SWAPI digest server."""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import api
from .pages import render_index

app = FastAPI(title="Star Wars API Digest")


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
    """Unknown routes get a plain-text body instead of FastAPI's JSON detail."""
    if exc.status_code == 404:
        return PlainTextResponse("Not Found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.get("/", response_class=HTMLResponse)
@app.get("/index.html", response_class=HTMLResponse)
def serve_index():
    """Serve the landing page; does not start a run."""
    return render_index(api.ORCHESTRATOR.context.snapshot())


app.include_router(api.router)
