from .date import Date, date
