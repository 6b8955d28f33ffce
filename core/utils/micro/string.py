import re

class String:

    def __init__ ( self ):
        pass

    def snake ( self, value: str ):

        if not value: return ''

        value = re.sub(r'[\s\-]+', '_', value)
        value = re.sub(r'(?<!^)(?=[A-Z])', '_', value).lower()

        return re.sub(r'_+', '_', value).strip('_')

    def join ( self, *parts: str, separator: str = '.' ):

        cleaned = [str(p).strip(separator) for p in parts if p not in (None, '', separator)]
        return separator.join(c for c in cleaned if c).replace(f"{separator}{separator}", separator)

    def present ( self, value ):

        if value is None: return False
        if isinstance(value, str): return value != ''

        return bool(value)
