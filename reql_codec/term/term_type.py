from enum import IntEnum


class TermType(IntEnum):
	""" Protocol codes for the query terms this driver builds. """
	DATUM = 1
	MAKE_ARRAY = 2
	MAKE_OBJ = 3
	VAR = 10
	IMPLICIT_VAR = 13
	DB = 14
	TABLE = 15
	GET = 16
	EQ = 17
	NE = 18
	LT = 19
	LE = 20
	GT = 21
	GE = 22
	NOT = 23
	ADD = 24
	GET_FIELD = 31
	FILTER = 39
	ORDER_BY = 41
	COUNT = 43
	INSERT = 56
	FUNC = 69
	LIMIT = 71
	GET_ALL = 78
