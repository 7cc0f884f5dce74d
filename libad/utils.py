# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from datetime import datetime, timedelta

import ldap.dn
from dateutil.tz import tzutc

from libad._constants import (
    SENSITIVE_ATTRIBUTES, FILETIME_EPOCH_OFFSET, FILETIME_TICKS_PER_SECOND,
    FILETIME_NEVER
)


UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=tzutc())


#
# Type coercion. python-ldap hands back bytes, callers want str.
#


def ensure_bytes(val):
    if val is not None and not isinstance(val, bytes):
        return str(val).encode()
    return val


def ensure_str(val):
    if val is not None and not isinstance(val, str):
        if isinstance(val, bytes):
            return val.decode('utf-8')
        return str(val)
    return val


def ensure_int(val):
    if val is not None and not isinstance(val, int):
        return int(ensure_str(val))
    return val


def ensure_list_bytes(val):
    return [ensure_bytes(v) for v in val]


def ensure_list_str(val):
    return [ensure_str(v) for v in val]


def is_sequence(val):
    """True for list and tuple values. Strings and bytes are not sequences
    of attribute values even though python treats them as such.
    """
    return isinstance(val, (list, tuple))


#
# Logging helpers
#


def display_log_value(attr, value, hide_value='********'):
    if attr.lower() in SENSITIVE_ATTRIBUTES:
        if is_sequence(value):
            return [hide_value for _ in value]
        return hide_value
    return value


def display_log_data(data, hide_value='********'):
    """Copy of an attribute mapping that is safe to log."""
    return {k: display_log_value(k, v, hide_value) for k, v in data.items()}


#
# DN and time helpers
#


def dn_rdn_value(dn):
    """Return the value of the first RDN of a DN.

        eg. 'CN=Sales Team,OU=Groups,DC=example,DC=com' -> 'Sales Team'
    """
    rdns = ldap.dn.str2dn(ensure_str(dn))
    if not rdns:
        return None
    return rdns[0][0][1]


def filetime_to_datetime(value):
    """Convert a Windows FILETIME (100ns intervals since 1601-01-01 UTC) as
    stored by Active Directory into an aware UTC datetime.

    :param value: A FILETIME as int, str or bytes
    :type value: int
    :returns: datetime, or None if the value is absent, 0, "never" or
              beyond what datetime can hold
    :raises: ValueError - if the value is not an integer
    """
    if value is None:
        return None
    ticks = ensure_int(value)
    if ticks <= 0 or ticks >= FILETIME_NEVER:
        return None
    micro = ticks // (FILETIME_TICKS_PER_SECOND // 1000000)
    try:
        return UNIX_EPOCH + timedelta(microseconds=micro - FILETIME_EPOCH_OFFSET * 1000000)
    except OverflowError:
        return None
