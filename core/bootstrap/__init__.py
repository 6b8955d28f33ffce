from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from app.repositories.user_repository import make_store
from app.services import UserService, ActionService, DashboardService, DASHBOARD_PATH
from core.interface.response import api_error_handler
from core.routing import route
from core.utils.api import ApiError
from core.utils.cache import ViewCache
from core.utils.config import config
from core.utils.date import date as default_date
from core.utils.micro import module
from core.utils import log
import uvicorn, logging

logger = logging.getLogger(__name__)

def templates ( date = None ):

    views = Jinja2Templates(directory=module.path('views'))
    views.env.filters['human'] = (date or default_date).human

    return views

def services ( app: FastAPI, store = None, sleep = None, date = None, rng = None ):

    date   = date or default_date
    env    = config.get('app.env', 'development')
    delays = config.get('server.delays', {})

    app.state.views = ViewCache(
        maxsize = int(config.get('server.cache.maxsize', 128)),
        ttl     = float(config.get('server.cache.ttl', 300)),
    )

    store = store or make_store(
        driver = config.get('database.driver', 'memory'),
        url    = config.get('database.url', 'sqlite://'),
        echo   = config.get('database.echo', False),
        date   = date,
    )

    app.state.users = UserService(
        store, date=date, sleep=sleep, environment=env,
        location = config.get('server.location', 'Cloud Run'),
        delays   = delays,
    )

    app.state.actions = ActionService(
        date=date, sleep=sleep, rng=rng, environment=env,
        invalidate = app.state.views.invalidate,
        processor  = config.get('server.processor', 'Cloud Run Server'),
        location   = config.get('server.report_location', 'Google Cloud Run'),
        delays     = delays,
        view       = DASHBOARD_PATH,
    )

    app.state.dashboard = DashboardService(app.state.users, app.state.actions, date=date, invalidate=app.state.views.invalidate)
    app.state.templates = templates(date)

    return app

def create_app ( store = None, sleep = None, date = None, rng = None ):

    config.init()
    log.setup(config.get('logging.level', 'INFO'), config.get('logging.file'), config.get('logging.format'))

    app = FastAPI(
        title       = config.get("app.name"),
        version     = config.get("app.version", '1.0.0'),
        description = config.get("app.description"),
    )

    services(app, store=store, sleep=sleep, date=date, rng=rng)
    app.add_exception_handler(ApiError, api_error_handler)
    route.init(app)

    logger.info("%s ready (env=%s)", config.get("app.name"), config.get("app.env"))
    return app

def run ():

    uvicorn.run(
        "main:app",
        host=config.get("app.host", "127.0.0.1"),
        port=int(config.get("app.port", 8000)),
        reload=config.is_local()
    )
