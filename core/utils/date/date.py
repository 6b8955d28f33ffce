import asyncio, datetime, zoneinfo

class Date:

    def __init__ ( self, timezone: str = "UTC", fmt: str = "%Y-%m-%d %H:%M:%S" ):

        self.timezone    = zoneinfo.ZoneInfo(timezone)
        self.default_fmt = fmt

    def now_ms ( self ):

        return int(self.now_dt().timestamp() * 1000)

    def now_dt ( self ):

        return datetime.datetime.now(self.timezone)

    def now_iso ( self ):

        return self.iso(self.now_dt())

    def iso ( self, dt: datetime.datetime ):

        utc = dt.astimezone(datetime.timezone.utc) if dt.tzinfo else dt.replace(tzinfo=datetime.timezone.utc)
        return utc.strftime('%Y-%m-%dT%H:%M:%S.') + f"{utc.microsecond // 1000:03d}Z"

    def parse_iso ( self, value: str ):

        if not value: return None

        try: dt = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError: return None

        return dt if dt.tzinfo else dt.replace(tzinfo=datetime.timezone.utc)

    def human ( self, value: str, fmt: str = None ):

        dt = self.parse_iso(value)
        if not dt: return value or ''

        return dt.astimezone(self.timezone).strftime(fmt or self.default_fmt)

    async def sleep ( self, ms: float ):

        if ms and ms > 0: await asyncio.sleep(ms / 1000.0)

date = Date()
