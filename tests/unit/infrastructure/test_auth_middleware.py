"""Unit tests for AuthMiddleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from football_network.application.auth.dtos import TokenValidationDto
from football_network.application.common.result import ErrorKind, Result
from football_network.domain.shared.clock import utc_now
from football_network.infrastructure.auth.auth_middleware import AuthMiddleware


async def call_next(request):
    return JSONResponse(content={"message": "success"})


class TestAuthMiddleware:
    @pytest.fixture
    def dispatcher(self):
        dispatcher = MagicMock()
        dispatcher.send = AsyncMock()
        return dispatcher

    @pytest.fixture
    def middleware(self):
        return AuthMiddleware(FastAPI())

    @pytest.fixture
    def mock_request(self, dispatcher):
        request = MagicMock(spec=Request)
        request.headers = {}
        request.state = MagicMock()
        request.url.path = "/api/v1/clubs"
        request.app.state.container.dispatcher = dispatcher
        return request

    @pytest.mark.asyncio
    async def test_valid_token_sets_principal(self, middleware, mock_request, dispatcher, principal):
        user = principal()
        dispatcher.send.return_value = Result.success(
            TokenValidationDto(principal=user, expires_at=utc_now())
        )
        mock_request.headers = {"Authorization": "Bearer valid_token"}

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200
        assert mock_request.state.auth_user == user
        query = dispatcher.send.await_args.args[0]
        assert query.token == "valid_token"

    @pytest.mark.asyncio
    async def test_rejected_token_is_401_even_when_auth_optional(
        self, middleware, mock_request, dispatcher
    ):
        dispatcher.send.return_value = Result.failure("Token has expired.", ErrorKind.UNAUTHORIZED)
        mock_request.headers = {"Authorization": "Bearer stale"}

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 401
        body = response.body.decode()
        assert "invalid_token" in body
        assert "Token has expired." in body

    @pytest.mark.asyncio
    async def test_missing_token_with_auth_required(self, middleware, mock_request, dispatcher):
        middleware.auth_required = True

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 401
        assert "Missing authorization token" in response.body.decode()
        dispatcher.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_token_without_auth_required(self, middleware, mock_request):
        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200
        assert mock_request.state.auth_user is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        ["/api/v1/auth/login", "/api/v1/auth/refresh", "/api/v1/navigation/resolve", "/health"],
    )
    async def test_public_paths_pass_without_token(self, middleware, mock_request, path):
        middleware.auth_required = True
        mock_request.url.path = path

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("abc", None),
            ("Basic abc", None),
            ("Bearer a b", None),
            (None, None),
        ],
    )
    def test_extract_token(self, header, expected):
        assert AuthMiddleware._extract_token(header) == expected
