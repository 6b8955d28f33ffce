from importlib import util
from typing import Any
import importlib, pkgutil, os, sys, types

class Modules:

    _global_cache = {}

    def __init__ ( self ):

        self.cache = Modules._global_cache

    def root ( self ):

        return os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

    def find ( self, name: str, as_module: bool = False ):

        map = {
            'models'         : 'app/models',
            'repositories'   : 'app/repositories',
            'services'       : 'app/services',
            'controllers'    : 'app/controllers',
            'routes'         : 'routes',
            'config'         : 'config',
            'tests'          : 'tests',
            'logs'           : 'storage/logs',
            'views'          : 'resources/views',
            'migrations'     : 'database/migrations',
            'env'            : '.env',
            'env_local'      : '.env.local',
            'env_production' : '.env.production',
            'env_secrets'    : '.env.secrets',
        }

        name = map.get(name, name)
        return name.replace('/', '.') if as_module else name

    def path ( self, name: str ):

        return os.path.join(self.root(), self.find(name))

    def normalize ( self, path: str ):

        return path.strip().replace("\\", ".").replace("/", ".").replace("..", ".").strip(".")

    def get ( self, name: str, default: Any = None ):

        return self.cache.get(self.normalize(name), default)

    def register ( self, name: str, module: types.ModuleType ):

        self.cache[self.normalize(name)] = module
        sys.modules[self.normalize(name)] = module

        return module

    def exists ( self, name: str ):

        try: return bool(self.get(name)) or util.find_spec(self.normalize(name)) is not None
        except (ImportError, ValueError): return False

    def require ( self, name: str, handle: bool = False, reload: bool = False ):

        path = self.normalize(name)
        if path in self.cache and not reload: return self.get(path)

        try:
            module = importlib.import_module(path)
            if reload: module = importlib.reload(module)
            return self.register(path, module)

        except ImportError:
            if handle: return None
            raise

    def children ( self, name: str ):

        package = self.require(name, True)
        if package is None or not hasattr(package, '__path__'): return []

        return [f"{self.normalize(name)}.{mod_name}" for _, mod_name, _ in pkgutil.iter_modules(package.__path__)]

    def load ( self, *paths, reload: bool = False ):

        loaded = []

        for path in paths:
            for mod_full in self.children(path):

                mod = self.require(mod_full, False, reload)
                loaded.append(mod)

        return loaded
