from .view import ViewCache
