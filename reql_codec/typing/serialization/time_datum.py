from datetime import datetime, timedelta, timezone
import re
from typing import Any

from .vars import __reql_type__, TIME, EPOCH_TIME, TIMEZONE
from .encoding_context import EncodingContext
from ...utilities import logger


_TIMEZONE_PATTERN = re.compile(r"^([+-])(\d{2}):(\d{2})$")

def datetime_to_datum(obj: datetime, context: EncodingContext) -> dict[str, Any]:
	""" Converts a datetime into a TIME pseudo-type. Naive datetimes are treated as UTC. """
	if obj.tzinfo is None or obj.utcoffset() is None:
		logger.logger.warning(f"Encoding naive datetime {obj.isoformat()} as UTC.\n{context}")
		obj = obj.replace(tzinfo=timezone.utc)

	offset = obj.utcoffset()
	assert offset is not None
	offset_minutes = int(offset.total_seconds()) // 60
	sign = "-" if offset_minutes < 0 else "+"
	hours, minutes = divmod(abs(offset_minutes), 60)
	return {
		__reql_type__: TIME,
		EPOCH_TIME: obj.timestamp(),
		TIMEZONE: f"{sign}{hours:02d}:{minutes:02d}"
	}

def datum_to_datetime(datum: Any, context: EncodingContext) -> datetime:
	""" Converts a TIME pseudo-type back into a timezone-aware datetime. """
	if not isinstance(datum, dict) or datum.get(__reql_type__) != TIME:
		raise ValueError(f"{datum} is not a {TIME} pseudo-type.\n{context}")

	epoch_time = datum.get(EPOCH_TIME)
	if isinstance(epoch_time, bool) or not isinstance(epoch_time, (int, float)):
		raise ValueError(f"{TIME} pseudo-type has an invalid {EPOCH_TIME} '{epoch_time}'.\n{context}")

	tz_str = datum.get(TIMEZONE, "+00:00")
	match = _TIMEZONE_PATTERN.match(tz_str) if isinstance(tz_str, str) else None
	if not match:
		raise ValueError(f"{TIME} pseudo-type has an invalid {TIMEZONE} '{tz_str}'.\n{context}")
	sign, hours, minutes = match.groups()
	offset = timedelta(hours=int(hours), minutes=int(minutes))
	if sign == "-":
		offset = -offset

	try:
		return datetime.fromtimestamp(epoch_time, tz=timezone(offset))
	except (OverflowError, OSError, ValueError) as e:
		raise ValueError(f"{TIME} pseudo-type cannot be represented as a datetime: {e}.\n{context}") from e
