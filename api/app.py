from dotenv import load_dotenv

# Load environment variables BEFORE any imports that read settings
load_dotenv()

from fastapi import FastAPI

from api.models.schemas import HealthResponse
from api.routers import webhook
from common.config import get_settings
from common.log_setup import configure_logging
import uvicorn

configure_logging(get_settings().log_level)


# Create FastAPI application
app = FastAPI(
    title="PR Maintainability Checker",
    description="""
    GitHub App that reviews pull requests for maintainability issues.

    ## Checks

    * **Lines of Code** - flags JavaScript / TypeScript files over 200 LOC
    * **Number of Methods** - flags files with more than 8 functions
    * **TODO / FIXME** - lists outstanding TODO and FIXME comments
    * **Lockfile consistency** - warns when `package.json` changes without `package-lock.json`

    ## Getting Started

    1. Set `GITHUB_APP_ID`, `GITHUB_PRIVATE_KEY_PATH` and `GITHUB_WEBHOOK_SECRET`
    2. Point the GitHub App webhook at `/api/v1/webhook/github`
    3. Subscribe the app to pull request events
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include routers
app.include_router(
    webhook.router,
    prefix="/api/v1/webhook",
    tags=["Webhook"]
)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy")


def run_server():
    """
    Run the API server.

    This function is used as an entry point for the CLI command.
    """
    settings = get_settings()
    uvicorn.run(
        "api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run_server()
