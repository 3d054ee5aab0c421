import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from pydantic import ValidationError

from api.dependencies import get_github_client, verified_webhook_body
from api.models.schemas import WebhookResponse
from api.services.review_service import handle_pull_request_event
from maintainability.models import PullRequestEvent

logger = logging.getLogger(__name__)

router = APIRouter()

REVIEWED_ACTIONS = {"opened", "synchronize"}


@router.post("/github", response_model=WebhookResponse, response_model_exclude_none=True)
async def github_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    body: bytes = Depends(verified_webhook_body),
):
    """
    Receive GitHub App webhooks.

    Handles:
    - ping: acknowledged so GitHub can verify the webhook configuration
    - pull_request (opened / synchronize): run the maintainability review
      in the background and post a summary comment
    """
    try:
        payload = json.loads(body)
    except ValueError:
        raise HTTPException(status_code=400, detail="Webhook body is not valid JSON")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Webhook body must be a JSON object")

    event_type = request.headers.get("X-GitHub-Event", "")
    action = payload.get("action")

    if event_type in ("pull_request", "ping"):
        logger.info(
            f"Received {event_type} event: action={action}, "
            f"pr={(payload.get('pull_request') or {}).get('number')}"
        )

    if event_type == "ping":
        return WebhookResponse(status="ok", event=event_type)

    if event_type != "pull_request":
        return WebhookResponse(
            status="ignored",
            reason=f"event is '{event_type}', not 'pull_request'",
            event=event_type,
        )

    if action not in REVIEWED_ACTIONS:
        return WebhookResponse(
            status="ignored",
            reason=f"action is '{action}', not 'opened' or 'synchronize'",
            event=event_type,
        )

    try:
        event = PullRequestEvent.from_payload(payload)
    except ValidationError as e:
        logger.error(f"Malformed pull_request payload: {e}")
        raise HTTPException(status_code=400, detail="Malformed pull_request payload")

    pr_label = f"{event.repo_full_name}#{event.pr_number}"
    logger.info(f"PR review triggered: {pr_label} ({action})")

    # Built only for reviews, so pings succeed before the GitHub App is configured
    github = get_github_client()
    background_tasks.add_task(handle_pull_request_event, event, github)

    return WebhookResponse(status="processing", pr=pr_label, event=event_type)
