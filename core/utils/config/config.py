from typing import Any
from ..micro import module
from .env import Env

config_store = {}

class Config:

    def __init__ ( self ):

        self.env = Env()

    def init ( self ):

        self.env.init()
        base_path = module.find('config', True)

        for mod_full in module.children(base_path):

            name = mod_full.rsplit('.', 1)[-1].lower()
            mod = module.require(mod_full, reload=True)

            if mod and hasattr(mod, "config"):
                config_store[name] = mod.config() if callable(mod.config) else mod.config

        return config_store

    def get ( self, key: str = None, default: Any = None ):

        value = config_store

        if key is not None:
            for part in key.split("."):
                if isinstance(value, dict) and part in value: value = value[part]
                else: return self.env.get(key.upper().replace('.', '_'), self.env.get(key, default))

        return value

    def is_local ( self ):

        return self.env.is_local()
