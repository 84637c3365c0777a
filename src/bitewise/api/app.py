"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from bitewise.api.models import AskRequest, AskResponse
from bitewise.app_logging import configure_logging
from bitewise.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/ask", response_model=AskResponse)
    async def ask(payload: AskRequest, request: Request) -> AskResponse:
        """Answer a nutrition question, enriched with FDC facts when relevant."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.answer_service.answer(payload.question)
        return AskResponse(
            answer=result.answer, used_enrichment=result.used_enrichment
        )

    return app
