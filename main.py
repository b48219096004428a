import os
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from approval_service import ApprovalService
from domain.callback import parse_callback_payload, validate_callback
from domain.constants import ServiceConfig
from domain.errors import CallbackValidationError, EntropyError, EventNotFound, StoreError
from domain.handler.events import create_event, get_event
from domain.handler.process_callback import process_callback

# Configure logging
logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    service = ApprovalService.create()
    app.state.service = service
    logger.info(f"Starting {ServiceConfig.NAME} service...")
    try:
        yield
    finally:
        await service.aclose()

app = FastAPI(title="Approval Events API", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

def get_service(request: Request) -> ApprovalService:
    return request.app.state.service

class EventCreateRequest(BaseModel):
    timeout_epoch: int

@app.post("/events", status_code=201)
async def post_event(request: Request, service: ApprovalService = Depends(get_service)):
    """Create an event that waits for approval until `timeout_epoch`."""
    try:
        body = EventCreateRequest.model_validate(await request.json())
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid request to create an event")

    try:
        event = await create_event(service.deps, body.timeout_epoch)
    except (EntropyError, StoreError) as e:
        logger.error(f"Error creating event: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    return event.to_dict()

@app.get("/events/{event_id}")
async def read_event(event_id: str, service: ApprovalService = Depends(get_service)):
    try:
        event = await get_event(service.deps, event_id)
    except EventNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        logger.error(f"Error fetching event {event_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    return event.to_dict()

@app.post("/callback", response_class=PlainTextResponse)
async def callback(payload: str = Form(""), service: ApprovalService = Depends(get_service)):
    """Slack interactivity endpoint. Answers immediately; the event is updated in the background."""
    logger.debug(f"payload {payload}")
    try:
        msg = parse_callback_payload(payload)
        validate_callback(msg)
    except CallbackValidationError as e:
        raise HTTPException(status_code=400, detail=f"{str(e)}: {payload}")

    service.dispatcher.dispatch(process_callback, service.deps, msg)
    return ""

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv('PORT', 8000)))
