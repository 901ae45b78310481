__reql_type__ = "$reql_type$"
""" Key marking a pseudo-type object in a datum. """

TIME = "TIME"
EPOCH_TIME = "epoch_time"
TIMEZONE = "timezone"
