from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from src.adapters.auth.session_store import InMemorySessionStore
from src.api.auth_utils import hash_token
from src.api.deps import (
    AuthenticatorFactory,
    get_authenticator_factory,
    get_rules,
    get_session_store,
)
from src.api.schemas import MessageResponse, read_form
from src.components.auth import AuthenticateInput, run_authenticate
from src.rules.models import Rules

router = APIRouter()


@router.post("/login", responses={401: {"model": MessageResponse}})
async def login(
    request: Request,
    rules: Rules = Depends(get_rules),
    make_authenticator: AuthenticatorFactory = Depends(get_authenticator_factory),
) -> Response:
    """Sign in with the credentials provider; the session cookie rides on the redirect."""
    redirect = RedirectResponse(
        url=rules.auth.sign_in_redirect, status_code=status.HTTP_303_SEE_OTHER
    )
    message = await run_authenticate(
        AuthenticateInput(form=await read_form(request), provider=rules.auth.provider),
        make_authenticator(redirect),
    )
    if message is not None:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"message": message})
    return redirect


@router.post("/logout")
def logout(
    request: Request,
    rules: Rules = Depends(get_rules),
    session_store: InMemorySessionStore = Depends(get_session_store),
) -> Response:
    """Drop the session and clear the cookie."""
    cookie_name = rules.auth.sessions.cookie.name
    raw = request.cookies.get(cookie_name)
    if raw:
        token = raw.removeprefix("Bearer ").strip()
        session_store.delete(hash_token(token))

    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(key=cookie_name)
    return response
