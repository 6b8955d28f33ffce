from core.utils.config import Env, env

config = {
    'name'        : env('APP_NAME', 'Server Demo'),
    'description' : env('APP_DESCRIPTION', 'Request/response, form submission and simulated server-side delays'),
    'version'     : env('APP_VERSION', '1.0.0'),
    'local'       : env('APP_LOCAL', 'en'),
    'env'         : Env().label('development'),
    'debug'       : env('APP_DEBUG', True),
    'host'        : env('APP_HOST', '127.0.0.1'),
    'port'        : env('APP_PORT', 8000),
}
