import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.chat.router import router as chat_router
from api.ui.router import router as ui_router
from config import load_settings
from errors import ValidationError

settings = load_settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger(__name__)

app = FastAPI(title="Multi-Model Chat API", version="1.0.0")

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[],              # keep empty when using regex
        allow_origin_regex=".*",       # matches any origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def chat_body_error_handler(request: Request, exc: RequestValidationError):
    # The chat endpoint only answers 200/400/500 with {"response"} or {"error"}.
    if request.url.path == "/api/chat":
        logger.info("Rejected chat body errors=%d", len(exc.errors()))
        error = ValidationError()
        return JSONResponse(status_code=error.status_code, content={"error": error.message})
    return await request_validation_exception_handler(request, exc)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(chat_router)
app.include_router(ui_router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
