from contextlib import contextmanager
from typing import Any, Callable
from app.models import ActionResult
from core.utils.api import ApiError
from core.utils.date import Date, date as default_date
from core.utils.micro import string
from .user_service import UserService
from .action_service import ActionService
import orjson, logging

logger = logging.getLogger(__name__)

DASHBOARD_PATH = '/dashboard'

class DashboardService:
    """
    View state behind the dashboard page.

    Each operation raises its in-flight flag for exactly as long as the awaited
    handler runs and records the outcome as an ActionResult instead of raising.
    Any state change drops the cached rendering of the dashboard.
    """

    def __init__ ( self, users: UserService, actions: ActionService, date: Date = None, invalidate: Callable[[str], Any] = None, path: str = DASHBOARD_PATH ):

        self.user_service   = users
        self.action_service = actions
        self.date           = date or default_date
        self.invalidate     = invalidate
        self.path           = path

        self.users         = []
        self.server_info   = None
        self.action_result = None
        self.loading       = False
        self.adding_user   = False
        self.is_pending    = False
        self.show_add_form = False

    def _changed ( self ):

        if self.invalidate: self.invalidate(self.path)

    @contextmanager
    def _flag ( self, name: str ):

        setattr(self, name, True)
        self._changed()

        try: yield
        finally:
            setattr(self, name, False)
            self._changed()

    def _result ( self, success: bool, message: str, data: dict = None ):

        self.action_result = ActionResult(success=success, message=message, data=data, timestamp=self.date.now_iso())
        self._changed()

        return self.action_result

    def toggle_add_form ( self ):

        self.show_add_form = not self.show_add_form
        self._changed()

        return self.show_add_form

    async def fetch_users ( self ):

        with self._flag('loading'):

            try: data = await self.user_service.list_users()
            except Exception:
                logger.exception("Error fetching users")
                return False

            self.users       = list(data.get('users') or [])
            self.server_info = data.get('serverInfo')

        return True

    async def add_user ( self, name, email ):

        if not string.present(name) or not string.present(email):
            return self._result(False, 'Name and email are required')

        with self._flag('adding_user'):

            try: data = await self.user_service.create_user(name, email)
            except ApiError as exc: return self._result(False, exc.message or 'Failed to add user')
            except Exception:
                logger.exception("Error adding user")
                return self._result(False, 'A network error occurred')

            result = self._result(True, data.get('message'), data.get('user'))

            await self.fetch_users()
            self.show_add_form = False

        return result

    async def submit_form ( self, title, description, priority = None ):

        with self._flag('is_pending'):
            result = await self.action_service.process_form_data(title, description, priority)

        self.action_result = result
        self._changed()

        return result

    async def generate_report ( self ):

        with self._flag('is_pending'):
            result = await self.action_service.generate_report()

        self.action_result = result
        self._changed()

        return result

    def state ( self ):

        return {
            'users'         : list(self.users),
            'server_info'   : self.server_info,
            'action_result' : self.action_result.to_dict() if self.action_result else None,
            'loading'       : self.loading,
            'adding_user'   : self.adding_user,
            'is_pending'    : self.is_pending,
            'show_add_form' : self.show_add_form,
        }

    def context ( self ):

        state = self.state()
        result = state['action_result']

        state['action_json'] = orjson.dumps(result['data'], option=orjson.OPT_INDENT_2).decode() if result and result.get('data') else None
        return state
