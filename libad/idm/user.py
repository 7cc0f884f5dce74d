# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import logging

from libad._entry import Entry
from libad._constants import (
    UserAttr, USER_REQUIRED_ATTRIBUTES, USER_MODIFY_REQUIRED_ATTRIBUTES,
    ATTR_CONTAINER, ATTR_DISPLAY_NAME, ATTR_FIRSTNAME, ATTR_SURNAME
)
from libad.exceptions import MissingAttributeError, InvalidContainerError
from libad.idm.logon import LogonTimes
from libad.idm.memberof import MemberOf
from libad.idm.uac import UserAccountControl
from libad.utils import (ensure_str, ensure_list_str, is_sequence,
                         filetime_to_datetime, display_log_data)

log = logging.getLogger(__name__)


class User(Entry):
    """A single Active Directory user entry

    Wraps the attributes of a user read from the directory, or of a user
    about to be written to it.

        >>> user = User(('CN=Jane Doe,OU=Sales,DC=example,DC=com',
        ...              {'givenName': [b'Jane'], 'mail': [b'jdoe@example.com']}))
        >>> user.get_first_name()
        'Jane'

    :param entrydata: A python-ldap search result, a DN, or None
    :type entrydata: tuple
    :param attributes: Initial attributes
    :type attributes: dict
    """

    required = USER_REQUIRED_ATTRIBUTES

    def __init__(self, entrydata=None, attributes=None):
        super(User, self).__init__(entrydata, attributes)
        self.member_of = MemberOf(self)
        self.logon = LogonTimes(self)

    def _get_value(self, attr):
        return ensure_str(self.get_attribute(attr, 0))

    def _get_values(self, attr):
        values = self.get_attribute(attr)
        if values is None:
            return None
        if not is_sequence(values):
            values = [values]
        return ensure_list_str(values)

    def get_title(self):
        """Returns the users title.

        https://msdn.microsoft.com/en-us/library/ms680037(v=vs.85).aspx
        """
        return self._get_value(UserAttr.TITLE)

    def get_department(self):
        """Returns the users department.

        https://msdn.microsoft.com/en-us/library/ms675490(v=vs.85).aspx
        """
        return self._get_value(UserAttr.DEPARTMENT)

    def get_first_name(self):
        return self._get_value(UserAttr.GIVEN_NAME)

    def get_last_name(self):
        return self._get_value(UserAttr.SURNAME)

    def get_telephone_number(self):
        return self._get_value(UserAttr.TELEPHONE_NUMBER)

    def get_company(self):
        return self._get_value(UserAttr.COMPANY)

    def get_email(self):
        """Returns the users first email address."""
        return self._get_value(UserAttr.MAIL)

    def get_emails(self):
        """Returns all of the users email addresses.

        :returns: list of str, or None if the user has none
        """
        return self._get_values(UserAttr.MAIL)

    def get_home_mdb(self):
        """Returns the DN of the users mailbox store."""
        return self._get_value(UserAttr.HOME_MDB)

    def get_mail_nickname(self):
        return self._get_value(UserAttr.MAIL_NICKNAME)

    def get_user_principal_name(self):
        """Returns the users principal name. This is usually their email
        address.
        """
        return self._get_value(UserAttr.USER_PRINCIPAL_NAME)

    def get_proxy_addresses(self):
        """Returns the users proxy addresses, eg. 'SMTP:jdoe@example.com'

        :returns: list of str, or None
        """
        return self._get_values(UserAttr.PROXY_ADDRESSES)

    def get_script_path(self):
        return self._get_value(UserAttr.SCRIPT_PATH)

    def get_bad_password_count(self):
        return self._get_value(UserAttr.BAD_PWD_COUNT)

    def get_bad_password_time(self):
        return self._get_value(UserAttr.BAD_PASSWORD_TIME)

    def get_lockout_time(self):
        return self._get_value(UserAttr.LOCKOUT_TIME)

    def get_user_account_control(self):
        """Returns the users userAccountControl integer, as a string."""
        return self._get_value(UserAttr.USER_ACCOUNT_CONTROL)

    def get_profile_path(self):
        return self._get_value(UserAttr.PROFILE_PATH)

    def get_legacy_exchange_dn(self):
        return self._get_value(UserAttr.LEGACY_EXCHANGE_DN)

    def get_account_expiry(self):
        return self._get_value(UserAttr.ACCOUNT_EXPIRES)

    def get_show_in_address_book(self):
        """Returns the DNs of the address books the user is listed in.

        :returns: list of str, or None
        """
        return self._get_values(UserAttr.SHOW_IN_ADDRESS_BOOK)

    def get_account_control(self):
        """Returns the decoded userAccountControl flags

        :returns: UserAccountControl, or None if the attribute is absent
        """
        return UserAccountControl.from_value(self.get_user_account_control())

    def _has_flag(self, flag):
        uac = self.get_account_control()
        if uac is None:
            return False
        return bool(uac & flag)

    def is_disabled(self):
        return self._has_flag(UserAccountControl.ACCOUNTDISABLE)

    def is_locked_out(self):
        """Check if the account is locked out.

        Active Directory does not maintain the LOCKOUT bit, a non zero
        lockoutTime is what marks a locked account.
        """
        if self._has_flag(UserAccountControl.LOCKOUT):
            return True
        return self.get_lockout_datetime() is not None

    def password_never_expires(self):
        return self._has_flag(UserAccountControl.DONT_EXPIRE_PASSWD)

    def get_bad_password_datetime(self):
        return filetime_to_datetime(self.get_bad_password_time())

    def get_lockout_datetime(self):
        return filetime_to_datetime(self.get_lockout_time())

    def get_account_expiry_datetime(self):
        """Returns when the account expires

        :returns: datetime in UTC, or None if it never expires
        """
        return filetime_to_datetime(self.get_account_expiry())

    def _validate_required(self, required):
        for attr in required:
            value = self.get_attribute(attr)
            if value is None or value in ('', b'') or (is_sequence(value) and len(value) == 0):
                log.debug('%s is missing required attribute %s' % (self.dn, attr))
                raise MissingAttributeError(attr)

    def _validate_container(self):
        container = self.get_attribute(ATTR_CONTAINER)
        if not is_sequence(container):
            log.debug('%s has an invalid container %r' % (self.dn, container))
            raise InvalidContainerError()

    def prepare_for_create(self):
        """Check the attributes are complete for an add, and return them.

        All of ``required`` must be set, and ``container`` must be a list
        of RDNs. If no display_name is set, one is made from the first name
        and surname, and stored on the entry.

        :returns: dict of the attributes to add
        :raises: MissingAttributeError - if a required attribute is not set
        :raises: InvalidContainerError - if container is not a list
        """
        self._validate_required(self.required)
        self._validate_container()

        if self.get_attribute(ATTR_DISPLAY_NAME) is None:
            display_name = '%s %s' % (ensure_str(self.get_attribute(ATTR_FIRSTNAME, 0)),
                                      ensure_str(self.get_attribute(ATTR_SURNAME, 0)))
            self.set_attribute(ATTR_DISPLAY_NAME, display_name)

        attrs = self.get_attributes()
        log.debug('Prepared create of %s : %s' % (self.dn, display_log_data(attrs)))
        return attrs

    def prepare_for_modify(self):
        """Check the attributes are usable for a modify, and return them.

        Only ``username`` is required. ``container`` is optional, but must
        be a list of RDNs when set.

        :returns: dict of the attributes to modify
        :raises: MissingAttributeError - if username is not set
        :raises: InvalidContainerError - if container is set and not a list
        """
        self._validate_required(USER_MODIFY_REQUIRED_ATTRIBUTES)
        if self.has_attribute(ATTR_CONTAINER):
            self._validate_container()

        attrs = self.get_attributes()
        log.debug('Prepared modify of %s : %s' % (self.dn, display_log_data(attrs)))
        return attrs
