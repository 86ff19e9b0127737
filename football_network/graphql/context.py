"""GraphQL context factory.

Resolvers reach the dispatcher and the authorization service through
``info.context`` instead of importing module singletons.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from football_network.application.authorization.models import AuthUser
from football_network.infrastructure.container import Container


class GraphQLContext(BaseContext):
    """Per request context.

    Attributes:
        container: Application container built at startup
        auth_user: Principal resolved by AuthMiddleware (None if anonymous)
    """

    def __init__(self, container: Container, auth_user: Optional[AuthUser] = None) -> None:
        super().__init__()
        self.container = container
        self.auth_user = auth_user

    @property
    def dispatcher(self) -> Any:
        return self.container.dispatcher

    def can_access(self, resource: str, action: str) -> bool:
        return self.container.authorization.can_access(self.auth_user, resource, action)


async def get_graphql_context(request: Request) -> GraphQLContext:
    return GraphQLContext(
        container=request.app.state.container,
        auth_user=getattr(request.state, "auth_user", None),
    )
