import datetime as dt
from dateutil.rrule import rrule, DAILY
from weekroster.models import DAYS_IN_WEEK

def week_dates(start: dt.date):
    return [d.date() for d in rrule(DAILY, dtstart=start, count=DAYS_IN_WEEK)]
