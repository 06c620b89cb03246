"""
Job Tracker AI – HTTP API.
Routes delegate to the Scrape Agent and the Record Store; errors are returned as {"error": message}.
"""

from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from job_tracker_ai.agents.scrape_agent import run_scrape_agent
from job_tracker_ai.config import DATABASE_PATH
from job_tracker_ai.errors import AuthenticationError, InvalidInputError, JobTrackerError, RecordNotFoundError
from job_tracker_ai.schemas.application import JobApplication, JobApplicationCreate, JobApplicationUpdate
from job_tracker_ai.services.identity import UserHandle, require_user
from job_tracker_ai.services.record_store import RecordStore
from job_tracker_ai.utils.helpers import validate_job_url
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Job Tracker AI", version="0.1.0")


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


@lru_cache(maxsize=1)
def get_store() -> RecordStore:
    return RecordStore(DATABASE_PATH)


def get_owner_id(
    user: UserHandle = Depends(require_user),
    store: RecordStore = Depends(get_store),
) -> int:
    """Internal user id for the authenticated caller (created on first request)."""
    return store.get_or_create_user(user.external_id)


@app.exception_handler(AuthenticationError)
async def _authentication_error(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"error": "Unauthorized"})


@app.exception_handler(RecordNotFoundError)
async def _not_found_error(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(InvalidInputError)
async def _invalid_input_error(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(status_code=422, content={"error": f"{field}: {message}" if field else message})


@app.post("/api/scrape-job")
async def scrape_job(body: ScrapeRequest) -> JSONResponse:
    """Auto-fill data for a job posting URL."""
    url = validate_job_url(body.url or "")
    try:
        result = await run_scrape_agent(url)
    except JobTrackerError as e:
        logger.error("Error in scrape-job API for %s: %s", url, e)
        return JSONResponse(status_code=500, content={"error": f"Failed to scrape job data: {e}"})
    except Exception as e:
        logger.exception("Unexpected error in scrape-job API for %s", url)
        return JSONResponse(status_code=500, content={"error": f"Failed to scrape job data: {str(e) or type(e).__name__}"})
    return JSONResponse(content=result.to_response())


def _dump(application: JobApplication) -> dict:
    return application.model_dump(mode="json", by_alias=True)


@app.get("/api/job-applications")
def list_applications(owner_id: int = Depends(get_owner_id), store: RecordStore = Depends(get_store)) -> List[dict]:
    return [_dump(a) for a in store.list(owner_id)]


@app.post("/api/job-applications", status_code=201)
def create_application(
    body: JobApplicationCreate,
    owner_id: int = Depends(get_owner_id),
    store: RecordStore = Depends(get_store),
) -> dict:
    return _dump(store.create(owner_id, body))


@app.get("/api/job-applications/{record_id}")
def get_application(
    record_id: str,
    owner_id: int = Depends(get_owner_id),
    store: RecordStore = Depends(get_store),
) -> dict:
    return _dump(store.get(owner_id, record_id))


@app.put("/api/job-applications/{record_id}")
def update_application(
    record_id: str,
    body: JobApplicationUpdate,
    owner_id: int = Depends(get_owner_id),
    store: RecordStore = Depends(get_store),
) -> dict:
    return _dump(store.update(owner_id, record_id, body))


@app.delete("/api/job-applications/{record_id}")
def delete_application(
    record_id: str,
    owner_id: int = Depends(get_owner_id),
    store: RecordStore = Depends(get_store),
) -> dict:
    store.delete(owner_id, record_id)
    return {"message": "Job application deleted successfully"}
