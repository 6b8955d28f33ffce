from fastapi import FastAPI, APIRouter
from typing import Any
import copy, logging
from core.utils.micro import module, string, iters
from .helpers import resolve_controller_name, resolve_handler

logger = logging.getLogger(__name__)

class RouteCall:

    def __init__ ( self, ctx: dict ):

        self.ctx = {**ctx}
        self._start()

    def _start ( self ):

        return self \
            ._set('route_path', self._get('path')) \
            ._set('route_name', self._get('name')) \
            ._set('path', '') \
            .namespace(self._get('namespace', module.find('controllers', True))) \
            .controller(self._get('controller')) \
            .path(self._get('route_path'))

    def _set ( self, key: str, value: Any, merge=False ):

        current = self._get(key)

        if merge: self.ctx[key] = iters.unique([current, value] if current else [value])
        else: self.ctx[key] = value

        return self

    def _get ( self, key: str, default = '' ):

        return self.ctx.get(key) or default

    def namespace ( self, value: str ):

        return self._set("namespace", module.normalize(value))

    def controller ( self, value: str ):

        return self._set("controller", resolve_controller_name(self._get('namespace'), value))

    def path ( self, value: str ):

        return self._set("path", '/' + string.join(self._get('prefix'), value, separator='/'))

    def name ( self, value: str ):

        return self._set("name", string.join(self._get('route_name'), value))

    def build ( self ):

        self._set('handler', resolve_handler(self._get('handler', None), self._get('namespace'), self._get('controller')))
        self._set('key', string.join(self._get('path'), *self._get('methods')))

        return {**self.ctx}

    def init ( self, router: APIRouter ):

        context = self.build()

        router.add_api_route(
            path=str(context.get('path')),
            endpoint=context.get('handler'),
            methods=list(context.get('methods')),
            name=str(context.get('name')) or None,
            tags=list(context.get('tags') or []),
            include_in_schema=bool(context.get('schema', True)),
        )

        obj = router.routes[-1]
        obj.extra = {**getattr(obj, "extra", {}), **context}

        return router

class Route:

    def __init__ ( self ):

        self.ctx     = dict()
        self._routes = []
        self._stack  = [{}]

    def __enter__ ( self ):

        self._stack.append(copy.deepcopy(self.ctx))
        return self

    def __exit__ ( self, *args ):

        if len(self._stack) > 1:

            self._stack.pop()
            prev = copy.deepcopy(self._stack[-1])

            self.ctx.clear()
            self.ctx.update(prev)

        return False

    def _object ( self ):

        return {
            "methods"    : [],
            "path"       : '',
            "prefix"     : '',
            "name"       : '',
            "namespace"  : '',
            "controller" : '',
            "handler"    : None,
            "tags"       : [],
            "schema"     : True,
            "key"        : '',
        }

    def _apply ( self, path: str, method: Any, handler: Any ):

        call = RouteCall({
            **self._object(),
            **self.ctx,
            'path'    : path,
            'handler' : handler,
            'methods' : [str(m).upper() for m in iters.flatten(iters.ensure(method))],
        })

        self._routes.append(call)
        return call

    def _set ( self, key: str, value: Any, merge=False ):

        current = self._get(key)

        if merge: self.ctx[key] = iters.unique([current, value] if current else [value])
        else: self.ctx[key] = value

        return self

    def _get ( self, key: str, default = '' ):

        return self.ctx.get(key) or default

    def namespace ( self, value: str ):

        return self._set('namespace', value)

    def controller ( self, value: str ):

        return self._set('controller', value)

    def tag ( self, *args ):

        return self._set("tags", args, True)

    def prefix ( self, value: str ):

        return self._set("prefix", string.join(self._get('prefix'), value, separator='/'))

    def name ( self, value: str ):

        return self._set("name", string.join(self._get('name'), value))

    def hidden ( self ):

        return self._set("schema", False)

    def get ( self, path: str, handler: Any = None ):

        return self._apply(path, 'get', handler)

    def post ( self, path: str, handler: Any = None ):

        return self._apply(path, 'post', handler)

    def routes ( self ):

        return [dict(r.ctx) for r in self._routes]

    def build ( self, path: str = None ):

        if not self._routes: module.load(path or module.find('routes', True))
        return self._routes

    def init ( self, app: FastAPI ):

        self.build()

        router = APIRouter()
        for r in self._routes: r.init(router)

        app.include_router(router)
        logger.debug("registered %d routes", len(self._routes))

        return app

route = Route()
