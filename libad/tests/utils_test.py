# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---
#

from datetime import datetime

import pytest
from dateutil.tz import tzutc

from libad.utils import (ensure_str, ensure_int, ensure_list_str, is_sequence,
                         display_log_data, dn_rdn_value, filetime_to_datetime)


def test_ensure_str():
    assert ensure_str(b'jdoe') == 'jdoe'
    assert ensure_str('jdoe') == 'jdoe'
    assert ensure_str(512) == '512'
    assert ensure_str(None) is None
    assert ensure_list_str([b'a', 'b']) == ['a', 'b']


def test_ensure_int():
    assert ensure_int(b'512') == 512
    assert ensure_int('512') == 512
    with pytest.raises(ValueError):
        ensure_int('abc')


def test_is_sequence():
    assert is_sequence(['OU=Sales'])
    assert is_sequence(('OU=Sales',))
    assert not is_sequence('OU=Sales')
    assert not is_sequence(b'OU=Sales')
    assert not is_sequence(None)


def test_display_log_data_hides_passwords():
    data = {'username': 'jdoe', 'unicodePwd': [b'secret'], 'password': 'secret'}
    shown = display_log_data(data)
    assert shown == {'username': 'jdoe', 'unicodePwd': ['********'], 'password': '********'}
    # The original is left alone
    assert data['password'] == 'secret'


def test_dn_rdn_value():
    assert dn_rdn_value('CN=Sales Team,OU=Groups,DC=example,DC=com') == 'Sales Team'
    assert dn_rdn_value(b'CN=VPN Users,DC=example,DC=com') == 'VPN Users'
    assert dn_rdn_value(r'CN=Doe\, Jane,DC=example,DC=com') == 'Doe, Jane'


@pytest.mark.parametrize('value', [None, 0, '0', 9223372036854775807, b'9223372036854775807'])
def test_filetime_never(value):
    assert filetime_to_datetime(value) is None


def test_filetime_to_datetime():
    expected = datetime(2019, 4, 17, 18, 40, tzinfo=tzutc())
    assert filetime_to_datetime(132000000000000000) == expected
    assert filetime_to_datetime(b'132000000000000000') == expected
    # The unix epoch
    assert filetime_to_datetime('116444736000000000') == datetime(1970, 1, 1, tzinfo=tzutc())


def test_filetime_beyond_datetime_range():
    assert filetime_to_datetime(0x7FFFFFFFFFFFFFFE) is None
    assert filetime_to_datetime(b'9223372036854775806') is None
