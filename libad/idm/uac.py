# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from enum import IntFlag

from libad.utils import ensure_int


class UserAccountControl(IntFlag):
    """Bits of the userAccountControl attribute.

    https://learn.microsoft.com/en-us/troubleshoot/windows-server/active-directory/useraccountcontrol-manipulate-account-properties

        >>> UserAccountControl.from_value(b"66050").describe()
        ['ACCOUNTDISABLE', 'NORMAL_ACCOUNT', 'DONT_EXPIRE_PASSWD']
    """
    SCRIPT = 0x00000001
    ACCOUNTDISABLE = 0x00000002
    HOMEDIR_REQUIRED = 0x00000008
    LOCKOUT = 0x00000010
    PASSWD_NOTREQD = 0x00000020
    # Can't be set by writing the attribute, it is an ACE on the object.
    PASSWD_CANT_CHANGE = 0x00000040
    ENCRYPTED_TEXT_PWD_ALLOWED = 0x00000080
    TEMP_DUPLICATE_ACCOUNT = 0x00000100
    NORMAL_ACCOUNT = 0x00000200
    INTERDOMAIN_TRUST_ACCOUNT = 0x00000800
    WORKSTATION_TRUST_ACCOUNT = 0x00001000
    SERVER_TRUST_ACCOUNT = 0x00002000
    DONT_EXPIRE_PASSWD = 0x00010000
    MNS_LOGON_ACCOUNT = 0x00020000
    SMARTCARD_REQUIRED = 0x00040000
    TRUSTED_FOR_DELEGATION = 0x00080000
    NOT_DELEGATED = 0x00100000
    USE_DES_KEY_ONLY = 0x00200000
    DONT_REQ_PREAUTH = 0x00400000
    PASSWORD_EXPIRED = 0x00800000
    TRUSTED_TO_AUTH_FOR_DELEGATION = 0x01000000
    PARTIAL_SECRETS_ACCOUNT = 0x04000000

    @classmethod
    def from_value(cls, value):
        """Decode an attribute value (int, str or bytes).

        :returns: UserAccountControl, or None if value is None
        :raises: ValueError - if the value is not an integer
        """
        if value is None:
            return None
        return cls(ensure_int(value))

    def describe(self):
        """Names of the set flags, lowest bit first."""
        return [flag.name for flag in UserAccountControl if flag & self]
