# timebill/adapters/inbound/api/v1/endpoints/auth_endpoint.py (async version)

import logging

from fastapi import APIRouter, Depends

from timebill.adapters.inbound.api.deps import get_auth_service, get_current_consultant
from timebill.application.dtos.consultant_dto import ConsultantOutput, LoginInput, LoginOutput
from timebill.application.use_cases import AuthService
from timebill.domain.models import Consultant

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginOutput,
    summary="Login - Authenticate a consultant",
    description="Authenticates by consultant code and password and returns a JWT access token.",
    responses={
        401: {
            "description": "Invalid code or password",
            "content": {
                "application/json": {
                    "example": {"message": "Código ou senha inválidos", "code": "INVALID_CREDENTIALS"}
                }
            }
        }
    }
)
async def login(
        data: LoginInput,
        auth_service: AuthService = Depends(get_auth_service),
):
    consultant, token = await auth_service.login(data.code, data.password)
    return LoginOutput(
        consultant=ConsultantOutput.model_validate(consultant),
        access_token=token,
    )


@router.get(
    "/me",
    response_model=ConsultantOutput,
    summary="Get My Data - Logged in consultant data",
    description="Returns the authenticated consultant via JWT token.",
)
async def get_my_data(current_consultant: Consultant = Depends(get_current_consultant)):
    return current_consultant
