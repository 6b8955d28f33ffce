from ..micro import module
import logging, os

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup ( level: str = 'INFO', file: str = None, fmt: str = None ):

    root = logging.getLogger()

    for handler in root.handlers[:]:
        if getattr(handler, '_app_handler', False): root.removeHandler(handler)

    handlers = [logging.StreamHandler()]

    if file:
        path = file if os.path.isabs(file) else os.path.join(module.path('logs'), file)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding='utf-8'))

    for handler in handlers:
        handler._app_handler = True
        handler.setFormatter(logging.Formatter(fmt or FORMAT))
        root.addHandler(handler)

    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return root
