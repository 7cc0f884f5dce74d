# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import io
import logging
from enum import Enum

import ldif
from ldap.cidict import cidict

from libad.utils import (ensure_str, ensure_list_bytes, ensure_list_str,
                         is_sequence, display_log_data)

log = logging.getLogger(__name__)


def _attr_name(name):
    if isinstance(name, Enum):
        return name.value
    return ensure_str(name)


class Entry(object):
    """This class represents an LDAP Entry object.

        An LDAP entry consists of a DN and a set of attributes. Each
        attribute is either a single value or a *list* of values.
            ex. {
                'samaccountname': [b'jdoe'],
                'mail': [b'jdoe@example.com', b'jane.doe@example.com'],
                'container': ['OU=Sales', 'DC=example', 'DC=com'],
             }

        In python-ldap, entries are returned as a list of 2-tuples.
        Instance variables:
          dn - string - the string DN of the entry, or None
          data - cidict - case insensitive dict of the attributes and values
    """
    # the ldif class base64 encodes some attrs which I would rather see in raw
    # form - to encode specific attrs as base64, add them to the list below
    base64_attrs = ['objectguid', 'objectsid']

    def __init__(self, entrydata=None, attributes=None):
        """entrydata is either:
            * a search result entry from python-ldap -> (dn, {dict...})
            * or a continuation reference          -> (None, [urls])
            * the string DN of a new entry
            * None, for an entry not yet placed in the tree.

        attributes is an optional mapping used to populate the entry.
        """
        self.dn = None
        self.ref = None
        self.data = cidict()
        if entrydata:
            if isinstance(entrydata, tuple):
                if entrydata[0] is None:
                    self.ref = entrydata[1]  # continuation reference
                else:
                    self.dn = ensure_str(entrydata[0])
                    self.data = cidict(entrydata[1])
            elif isinstance(entrydata, str):
                if '=' not in entrydata:
                    raise ValueError('Entry dn must contain "="')
                self.dn = entrydata
            else:
                raise ValueError('Unsupported entry data %r' % (entrydata,))
        if attributes:
            self.update(attributes)

    def __bool__(self):
        """
        This allows us to do tests like if entry: returns false if there
        is no data, true otherwise
        """
        return len(self.data) > 0

    def __eq__(self, other):
        """Compare the DN and the values of every attribute.

        Values are compared as strings and without regard to order, so
        an entry built by hand matches the one read back from the server.
        """
        if not isinstance(other, Entry):
            return False
        if self.dn != other.dn:
            return False
        if set(a.lower() for a in self.get_attrs()) != \
                set(a.lower() for a in other.get_attrs()):
            return False
        for key in self.get_attrs():
            if set(self._str_values(key)) != set(other._str_values(key)):
                return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    def __contains__(self, name):
        return self.has_attribute(name)

    def __getitem__(self, name):
        return self.get_attribute(name)

    def _str_values(self, name):
        value = self.data.get(_attr_name(name))
        if value is None:
            return []
        if not is_sequence(value):
            value = [value]
        return ensure_list_str(value)

    def has_attribute(self, name):
        """
        Return True if this entry has an attribute named name, False otherwise
        """
        return _attr_name(name) in self.data

    def get_attribute(self, name, index=None):
        """Get the value of an attribute.

        :param name: An attribute name, case insensitive
        :type name: str
        :param index: Position of the value to return, or None for all
        :type index: int
        :returns: The value(s), or None if absent
        """
        value = self.data.get(_attr_name(name))
        if value is None or index is None:
            return value
        if is_sequence(value):
            try:
                return value[index]
            except IndexError:
                return None
        # A scalar is the only value it holds.
        if index == 0:
            return value
        return None

    def set_attribute(self, name, value):
        """Store value under name exactly as given.

        A multi valued attribute should be set with a list, a scalar is
        kept as a scalar.
        """
        self.data[_attr_name(name)] = value

    def remove_attribute(self, name):
        name = _attr_name(name)
        if name in self.data:
            del self.data[name]

    def get_attributes(self):
        """Return a copy of the attributes, safe to hand to a write.

        Changing the returned dict does not change the entry.
        """
        attrs = {}
        for k, v in self.data.items():
            attrs[k] = list(v) if is_sequence(v) else v
        return attrs

    def get_attrs(self):
        return list(self.data.keys())

    def get_ref(self):
        return self.ref

    def update(self, dct):
        """Set every attribute in dct, values are stored as given."""
        log.debug("updating dn: {}".format(self.dn))
        for k, v in list(dct.items()):
            self.set_attribute(k, v)
        log.debug("updated dn: {} with {}".format(self.dn, display_log_data(dct)))

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        """Convert the Entry to its LDIF representation"""
        sio = io.StringIO()
        # LDIFWriter only accepts plain dicts of byte lists, and we don't
        # want any line wrapping.
        newdata = {}
        for k, v in self.data.items():
            if not is_sequence(v):
                v = [v]
            newdata[k] = ensure_list_bytes(v)

        ldif.LDIFWriter(
            sio, Entry.base64_attrs, 1000).unparse(self.dn or '', newdata)
        return sio.getvalue()
