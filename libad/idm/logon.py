# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from libad._constants import UserAttr
from libad.utils import ensure_str, filetime_to_datetime


class LogonTimes(object):
    """The last logon / log off attribute group of an entry.

    lastLogon and lastLogoff are not replicated, each domain controller
    holds its own value. lastLogonTimestamp is replicated but lags by up
    to two weeks.

    :param entry: The entry holding the attributes
    :type entry: libad._entry.Entry
    """

    def __init__(self, entry):
        self._entry = entry

    def _get(self, attr):
        return ensure_str(self._entry.get_attribute(attr, 0))

    def get_last_logon(self):
        return self._get(UserAttr.LAST_LOGON)

    def get_last_logoff(self):
        return self._get(UserAttr.LAST_LOGOFF)

    def get_last_logon_timestamp(self):
        return self._get(UserAttr.LAST_LOGON_TIMESTAMP)

    def get_last_logon_datetime(self):
        return filetime_to_datetime(self.get_last_logon())

    def get_last_logoff_datetime(self):
        return filetime_to_datetime(self.get_last_logoff())

    def get_last_logon_timestamp_datetime(self):
        return filetime_to_datetime(self.get_last_logon_timestamp())
