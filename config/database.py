from core.utils.config import env

config = {
    'driver' : env('USER_STORE', 'memory'),
    'url'    : env('DATABASE_URL', 'sqlite://'),
    'echo'   : env('DATABASE_ECHO', False),
}
