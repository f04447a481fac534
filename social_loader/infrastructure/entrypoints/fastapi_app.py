"""
FastAPI entry point, HTTP access to the social media loader.

create_app() receives an IDocumentLoader so tests can inject fakes; the
module-level ``app`` is the Composition Root for real runs. The API key is
resolved per request, so the app starts even when SUPADATA_API_KEY is unset.

Run locally:
    uvicorn social_loader.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from typing import Any, Optional

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

load_dotenv()

from social_loader.domain.entities.document_record import LoadRequest  # noqa: E402
from social_loader.domain.errors import (  # noqa: E402
    ConfigurationError,
    UnsupportedOperationError,
    ValidationError,
)
from social_loader.domain.ports.document_loader_port import IDocumentLoader  # noqa: E402
from social_loader.infrastructure.composition import (  # noqa: E402
    build_load_use_case,
)

logger = logging.getLogger(__name__)


class LoadBody(BaseModel):
    url: str
    operation: str = "transcript"
    lang: Optional[str] = None
    text: bool = True
    mode: Optional[str] = None
    params: dict[str, Any] = Field(default_factory=dict)


def create_app(loader: IDocumentLoader) -> FastAPI:
    app = FastAPI(title="Social Media Loader API")

    @app.post("/load")
    def load(body: LoadBody) -> dict:
        """Load one URL and return its documents."""
        request = LoadRequest(
            url=body.url,
            operation=body.operation,
            lang=body.lang,
            text=body.text,
            mode=body.mode,
            extra_params=body.params,
        )
        try:
            records = loader.load(request)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except UnsupportedOperationError as exc:
            raise HTTPException(status_code=501, detail=str(exc)) from exc
        except ConfigurationError as exc:
            logger.error("Loader is not configured: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        except httpx.HTTPStatusError as exc:
            raise HTTPException(
                status_code=502,
                detail=f"Extraction service returned {exc.response.status_code}.",
            ) from exc
        except httpx.HTTPError as exc:
            raise HTTPException(
                status_code=502, detail=f"Extraction service request failed: {exc}"
            ) from exc

        return {
            "documents": [
                {"page_content": r.page_content, "metadata": r.metadata} for r in records
            ]
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app(build_load_use_case())
