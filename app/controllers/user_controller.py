from fastapi import Request
from core.interface.response import ok
from core.utils.api import InternalError
import logging

logger = logging.getLogger(__name__)

class UserController:

    async def index ( self, request: Request ):

        return ok(await request.app.state.users.list_users())

    async def store ( self, request: Request ):

        try: body = await request.json()
        except ValueError as exc:
            logger.exception("Error creating user")
            raise InternalError() from exc

        if not isinstance(body, dict): body = {}

        data = await request.app.state.users.create_user(body.get('name'), body.get('email'))
        return ok(data, 201)
