"""
Magic link API endpoints.

The confirmation page is served as HTML because Supabase delivers the
session tokens in the URL fragment, which browsers never send to the
server. The page posts the fragment back to the JSON endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from api.dependencies import get_confirmation_handler, get_magic_link_trigger
from shared.exceptions import ValidationError
from shared.models import EmailRequest

from .confirmation import ConfirmationHandler
from .interfaces import IMagicLinkTrigger
from .models import (
    ConfirmationOutcome,
    ConfirmationRequest,
    ConfirmationState,
    MagicLinkResult,
)
from .exceptions import MagicLinkError

router = APIRouter()
pages_router = APIRouter()


@router.post("/trigger-magic-link", response_model=MagicLinkResult)
async def trigger_magic_link(
    request: EmailRequest,
    trigger: IMagicLinkTrigger = Depends(get_magic_link_trigger),
):
    """
    Email a one-time login link for the given address.

    The link redirects to the confirmation page.
    """
    try:
        return await trigger.trigger(request.email)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except MagicLinkError:
        return JSONResponse(
            status_code=502,
            content=MagicLinkResult(success=False, message="Failed to send magic link").model_dump(),
        )


@router.post("/auth-confirm", response_model=ConfirmationOutcome)
async def confirm_magic_link(
    request: ConfirmationRequest,
    handler: ConfirmationHandler = Depends(get_confirmation_handler),
):
    """
    Exchange redirected tokens for a session and record the login.

    Responds 401 when the link is invalid or the tokens are rejected.
    """
    outcome = await handler.confirm(request)
    if outcome.state == ConfirmationState.FAILED:
        return JSONResponse(status_code=401, content=outcome.model_dump(mode="json"))
    return outcome


CONFIRM_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Blink.shop</title>
<style>
  body { font-family: Inter, -apple-system, BlinkMacSystemFont, sans-serif; display: flex;
         align-items: center; justify-content: center; height: 100vh; margin: 0;
         background: #fff; color: #111; text-align: center; }
  .card { max-width: 400px; padding: 2rem; background: #f9f9f9; border-radius: 12px;
          border: 1px solid #ddd; }
  p { color: #666; line-height: 1.4; }
</style>
</head>
<body>
<div class="card">
  <h1 id="title">Authenticating...</h1>
  <p id="message">Confirming authentication...</p>
</div>
<script>
  fetch("/api/auth-confirm", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({fragment: window.location.hash.substring(1)})
  })
    .then(function (r) { return r.json(); })
    .then(function (data) {
      var ok = data.state === "recorded";
      document.getElementById("title").textContent = ok ? "Success!" : "Error";
      document.getElementById("message").textContent = data.message;
      if (ok) { setTimeout(function () { window.close(); }, 4000); }
    })
    .catch(function () {
      document.getElementById("title").textContent = "Error";
      document.getElementById("message").textContent = "Authentication failed. Please try again.";
    });
</script>
</body>
</html>
"""


@pages_router.get("/auth-confirm", response_class=HTMLResponse)
async def confirmation_page() -> HTMLResponse:
    """Landing page for magic links."""
    return HTMLResponse(CONFIRM_PAGE)
