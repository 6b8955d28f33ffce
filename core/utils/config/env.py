from dotenv import load_dotenv
from typing import Any
from ..micro import module
import os

class Env:

    def __init__ ( self ):

        self.loaded = False

    def init ( self ):

        search_order = []

        if self.is_local(): search_order = ['env_local', 'env']
        else: search_order = ['env_production', 'env', 'env_local']

        for name in search_order:
            path = module.path(name)

            if os.path.isfile(path):
                load_dotenv(dotenv_path=path, override=False)
                break

        secrets_path = module.path('env_secrets')
        if os.path.isfile(secrets_path): load_dotenv(dotenv_path=secrets_path, override=False)

        self.loaded = True
        return dict(os.environ)

    def get ( self, key: str = None, default: Any = None ):

        if key is None: return dict(os.environ)
        return os.getenv(key, default)

    def label ( self, default: str = 'development' ):

        return os.getenv("APP_ENV") or os.getenv("NODE_ENV") or default

    def mode ( self ):

        return (os.getenv("APP_ENV") or os.getenv("ENV") or os.getenv("NODE_ENV") or "local").lower().strip()

    def is_local ( self ):

        return self.mode() in ("local", "development")

def env ( key: str, default: Any = None ):

    value = os.getenv(key)
    if value is None: return default

    if isinstance(default, bool): return value.strip().lower() in ('1', 'true', 'yes', 'on')
    if isinstance(default, int): return int(value)
    if isinstance(default, float): return float(value)

    return value
