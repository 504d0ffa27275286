"""
Ticket Triage - FastAPI Backend
"""
from fastapi import FastAPI

from ticket_triage import __version__
from ticket_triage.config import get_settings
from ticket_triage.middleware.logging_middleware import LoggingMiddleware
from ticket_triage.routes import classify, health, tickets


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title="Ticket Triage",
        description="Support ticket classification API",
        version=__version__
    )

    app.add_middleware(LoggingMiddleware)

    app.include_router(classify.router)
    app.include_router(tickets.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        return {"message": "Ticket Triage API", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
