from .user import User, ServerInfo
from .action_result import ActionResult
