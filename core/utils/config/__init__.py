from .config import Config
from .env import Env, env

config = Config()
