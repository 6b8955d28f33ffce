from core.utils.config import env

config = {
    'location'        : env('SERVER_LOCATION', 'Cloud Run'),
    'processor'       : env('SERVER_PROCESSOR', 'Cloud Run Server'),
    'report_location' : env('SERVER_REPORT_LOCATION', 'Google Cloud Run'),

    'delays' : {
        'list_users'   : env('DELAY_LIST_USERS', 500),
        'create_user'  : env('DELAY_CREATE_USER', 300),
        'process_form' : env('DELAY_PROCESS_FORM', 1000),
        'report'       : env('DELAY_REPORT', 2000),
    },

    'cache' : {
        'maxsize' : env('VIEW_CACHE_SIZE', 128),
        'ttl'     : env('VIEW_CACHE_TTL', 300),
    },
}
