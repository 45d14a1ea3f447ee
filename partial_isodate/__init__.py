"""ISO-8601 date parsing that remembers which components were missing.

"1985" parses to 1985-01-01 with month and day flagged as missing, so callers
can tell "some day in 1985" from an explicit January 1st.
"""

from .calendars import Calendar
from .errors import DateParseError, InvalidCalendarFields, NoFormatMatch
from .formats import FORMATS, FormatDescriptor
from .parser import DateParser, parse_date
from .types import MissingRecord, ParsedDate, ParseFailure
