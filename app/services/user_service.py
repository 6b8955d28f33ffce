from typing import Awaitable, Callable
from app.models import ServerInfo
from app.repositories.user_repository import UserStore
from core.utils.api import ValidationError, InternalError
from core.utils.date import Date, date as default_date
from core.utils.micro import string
import logging

logger = logging.getLogger(__name__)

class UserService:

    def __init__ (
        self,
        store: UserStore,
        date: Date = None,
        sleep: Callable[[float], Awaitable] = None,
        environment: str = 'development',
        location: str = 'Cloud Run',
        delays: dict = None,
    ):

        self.store       = store
        self.date        = date or default_date
        self.sleep       = sleep or self.date.sleep
        self.environment = environment
        self.location    = location
        self.delays      = {'list_users': 500, 'create_user': 300, **(delays or {})}

    async def list_users ( self ):

        delay = self.delays['list_users']
        await self.sleep(delay)

        server_info = ServerInfo(
            timestamp=self.date.now_iso(),
            environment=self.environment,
            server_location=self.location,
            processing_time=f"{delay}ms",
        )

        return {
            'users'      : [u.to_dict() for u in self.store.list()],
            'serverInfo' : server_info.to_dict(),
        }

    async def create_user ( self, name, email ):

        if not string.present(name) or not string.present(email):
            raise ValidationError('Name and email are required')

        try:
            await self.sleep(self.delays['create_user'])
            user = self.store.append(str(name), str(email))

        except Exception as exc:
            logger.exception("Error creating user")
            raise InternalError() from exc

        logger.info("user %s created", user.id)

        return {
            'user'       : user.to_dict(),
            'message'    : 'User created successfully',
            'serverInfo' : ServerInfo(timestamp=self.date.now_iso(), environment=self.environment).to_dict(),
        }
