"""Authentication endpoints - passwordless login by email."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.oxhub.api.dependencies import AuthServiceDep
from src.oxhub.core.rate_limit import limiter
from src.oxhub.schemas import (
    ApiResponse,
    LoginRequest,
    LoginResponse,
    VerifyOtpRequest,
    VerifyOtpResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[LoginResponse],
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Passcode issued",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "statusCode": 200,
                        "message": "OTP sent successfully",
                        "data": {"message": "OTP sent successfully", "otp": "123456"},
                        "timestamp": "2024-01-01T00:00:00.000000Z",
                    }
                }
            },
        },
        400: {"description": "Malformed email"},
    },
)
@limiter.limit("5/minute")
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> ApiResponse[LoginResponse]:
    """Send a one-time passcode, creating the account on first use.

    The passcode is returned in the body only when OTP_DELIVERY=response.
    """
    result = await service.login(login_data.email)
    return ApiResponse.wrap(result)


@router.post(
    "/verify",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[VerifyOtpResponse],
    responses={401: {"description": "Invalid OTP or OTP expired"}},
)
@limiter.limit("10/minute")
async def verify(
    request: Request, verify_data: VerifyOtpRequest, service: AuthServiceDep
) -> ApiResponse[VerifyOtpResponse]:
    """Exchange a passcode for a session token."""
    result = await service.verify_otp(verify_data.email, verify_data.otp)
    return ApiResponse.wrap(result)
