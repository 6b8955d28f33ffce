from core.utils.config import env

config = {
    'level'  : env('LOG_LEVEL', 'INFO'),
    'file'   : env('LOG_FILE', None),
    'format' : env('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
}
