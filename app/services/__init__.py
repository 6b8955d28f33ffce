from .user_service import UserService
from .action_service import ActionService
from .dashboard_service import DashboardService, DASHBOARD_PATH
