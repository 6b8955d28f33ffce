from .router import Route, RouteCall, route
