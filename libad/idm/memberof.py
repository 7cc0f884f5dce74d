# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from libad._constants import UserAttr
from libad.utils import ensure_str, ensure_list_str, is_sequence, dn_rdn_value


class MemberOf(object):
    """The memberOf attribute group of an entry.

    Works against anything providing get_attribute, so users, groups and
    computers can share it.

    :param entry: The entry holding the attributes
    :type entry: libad._entry.Entry
    """

    def __init__(self, entry):
        self._entry = entry

    def get_member_of(self):
        """Return the DNs of the groups the entry is a direct member of.

        :returns: list of str, or None if the attribute is absent
        """
        values = self._entry.get_attribute(UserAttr.MEMBER_OF)
        if values is None:
            return None
        if not is_sequence(values):
            values = [values]
        return ensure_list_str(values)

    def get_group_names(self):
        """Return the common name of each group the entry is a member of."""
        dns = self.get_member_of()
        if dns is None:
            return []
        return [dn_rdn_value(dn) for dn in dns]

    def in_group(self, group):
        """Check membership of a group given by name or DN

        :param group: Group common name or DN, case insensitive
        :type group: str
        """
        group = ensure_str(group).lower()
        dns = self.get_member_of() or []
        if '=' in group:
            return group in [dn.lower() for dn in dns]
        return group in [name.lower() for name in self.get_group_names()]
