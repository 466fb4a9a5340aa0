from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docx_revisions.api import endpoints
from docx_revisions.core.config import settings
from docx_revisions.core.logging_config import setup_logging


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Docx Track Changes API")

    # Configuração do CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(endpoints.router)

    return app


def run() -> None:
    import uvicorn

    uvicorn.run("docx_revisions.main:app", host=settings.HOST, port=settings.PORT)


app = create_app()

if __name__ == "__main__":
    run()
