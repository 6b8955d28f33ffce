from typing import Any, Awaitable, Callable
from app.models import ActionResult
from core.utils.date import Date, date as default_date
from core.utils.micro import string
import random, logging

logger = logging.getLogger(__name__)

class ActionService:
    """
    Simulated long-running server actions. Both handlers return an ActionResult
    and never raise; unexpected faults are logged and reported generically.
    """

    def __init__ (
        self,
        date: Date = None,
        sleep: Callable[[float], Awaitable] = None,
        invalidate: Callable[[str], Any] = None,
        rng: random.Random = None,
        environment: str = 'development',
        processor: str = 'Cloud Run Server',
        location: str = 'Google Cloud Run',
        delays: dict = None,
        view: str = '/dashboard',
    ):

        self.date        = date or default_date
        self.sleep       = sleep or self.date.sleep
        self.invalidate  = invalidate
        self.rng         = rng or random.Random()
        self.environment = environment
        self.processor   = processor
        self.location    = location
        self.delays      = {'process_form': 1000, 'report': 2000, **(delays or {})}
        self.view        = view

    def _result ( self, success: bool, message: str, data: dict = None ):

        return ActionResult(success=success, message=message, data=data, timestamp=self.date.now_iso())

    async def process_form_data ( self, title, description, priority = None ):

        if not string.present(title) or not string.present(description):
            return self._result(False, 'title and description are required')

        try:
            await self.sleep(self.delays['process_form'])

            processed = {
                'id'          : self.rng.randrange(10000),
                'title'       : title,
                'description' : description,
                'priority'    : priority,
                'createdAt'   : self.date.now_iso(),
                'processedBy' : self.processor,
                'environment' : self.environment,
            }

            if self.invalidate: self.invalidate(self.view)

        except Exception:
            logger.exception("Error processing form data")
            return self._result(False, 'A server error occurred')

        logger.info("form data %s processed", processed['id'])
        return self._result(True, 'Data processed successfully', processed)

    async def generate_report ( self ):

        try:
            await self.sleep(self.delays['report'])

            report = {
                'id'          : f"report_{self.date.now_ms()}",
                'generatedAt' : self.date.now_iso(),
                'stats'       : {
                    'totalUsers'  : self.rng.randrange(1000) + 100,
                    'activeUsers' : self.rng.randrange(500) + 50,
                    'systemLoad'  : f"{self.rng.random() * 100:.2f}%",
                    'uptime'      : f"{self.rng.randrange(168) + 1} hours",
                },
                'serverInfo'  : {
                    'environment' : self.environment,
                    'timestamp'   : self.date.now_iso(),
                    'location'    : self.location,
                },
            }

        except Exception:
            logger.exception("Error generating report")
            return self._result(False, 'An error occurred while generating the report')

        logger.info("report %s generated", report['id'])
        return self._result(True, 'Report generated successfully', report)
