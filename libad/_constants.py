# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from enum import Enum


class UserAttr(str, Enum):
    """Well known attribute names of an Active Directory user entry.

    Directory attribute names are case insensitive, these are kept in the
    lower case form the server hands back.
    """
    TITLE = 'title'
    DEPARTMENT = 'department'
    GIVEN_NAME = 'givenname'
    SURNAME = 'sn'
    TELEPHONE_NUMBER = 'telephonenumber'
    COMPANY = 'company'
    MAIL = 'mail'
    HOME_MDB = 'homemdb'
    MAIL_NICKNAME = 'mailnickname'
    USER_PRINCIPAL_NAME = 'userprincipalname'
    PROXY_ADDRESSES = 'proxyaddresses'
    SCRIPT_PATH = 'scriptpath'
    BAD_PWD_COUNT = 'badpwdcount'
    BAD_PASSWORD_TIME = 'badpasswordtime'
    LOCKOUT_TIME = 'lockouttime'
    USER_ACCOUNT_CONTROL = 'useraccountcontrol'
    PROFILE_PATH = 'profilepath'
    LEGACY_EXCHANGE_DN = 'legacyexchangedn'
    ACCOUNT_EXPIRES = 'accountexpires'
    SHOW_IN_ADDRESS_BOOK = 'showinaddressbook'
    MEMBER_OF = 'memberof'
    LAST_LOGON = 'lastlogon'
    LAST_LOGOFF = 'lastlogoff'
    LAST_LOGON_TIMESTAMP = 'lastlogontimestamp'

    def __str__(self):
        return self.value


# Names used by the create / modify attribute sets. These are the caller
# facing names, the write layer maps them onto directory attributes.
ATTR_USERNAME = 'username'
ATTR_FIRSTNAME = 'firstname'
ATTR_SURNAME = 'surname'
ATTR_EMAIL = 'email'
ATTR_CONTAINER = 'container'
ATTR_DISPLAY_NAME = 'display_name'

USER_REQUIRED_ATTRIBUTES = (
    ATTR_USERNAME,
    ATTR_FIRSTNAME,
    ATTR_SURNAME,
    ATTR_EMAIL,
    ATTR_CONTAINER,
)

USER_MODIFY_REQUIRED_ATTRIBUTES = (
    ATTR_USERNAME,
)

# Never written to the logs in clear.
SENSITIVE_ATTRIBUTES = [
    'userpassword',
    'unicodepwd',
    'password',
]

# Seconds between 1601-01-01 (FILETIME epoch) and 1970-01-01.
FILETIME_EPOCH_OFFSET = 11644473600
FILETIME_TICKS_PER_SECOND = 10000000
# accountExpires uses this (and 0) for "never".
FILETIME_NEVER = 0x7FFFFFFFFFFFFFFF
