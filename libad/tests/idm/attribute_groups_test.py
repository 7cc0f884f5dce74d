# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---
#

from datetime import datetime

from dateutil.tz import tzutc

from libad._entry import Entry
from libad.idm.memberof import MemberOf
from libad.idm.logon import LogonTimes


def test_member_of(search_result):
    member_of = MemberOf(Entry(search_result))
    assert member_of.get_member_of() == [
        'CN=Sales Team,OU=Groups,DC=example,DC=com',
        'CN=VPN Users,OU=Groups,DC=example,DC=com',
    ]
    assert member_of.get_group_names() == ['Sales Team', 'VPN Users']


def test_in_group(search_result):
    member_of = MemberOf(Entry(search_result))
    assert member_of.in_group('sales team')
    assert member_of.in_group('cn=vpn users,ou=groups,dc=example,dc=com')
    assert not member_of.in_group('Domain Admins')
    assert not member_of.in_group('CN=Sales Team,DC=example,DC=com')


def test_member_of_absent():
    member_of = MemberOf(Entry())
    assert member_of.get_member_of() is None
    assert member_of.get_group_names() == []
    assert not member_of.in_group('Sales Team')


def test_logon_times(search_result):
    entry = Entry(search_result)
    entry.set_attribute('lastLogoff', [b'0'])
    logon = LogonTimes(entry)
    assert logon.get_last_logon() == '132000000000000000'
    assert logon.get_last_logon_datetime() == datetime(2019, 4, 17, 18, 40, tzinfo=tzutc())
    assert logon.get_last_logoff() == '0'
    assert logon.get_last_logoff_datetime() is None
    assert logon.get_last_logon_timestamp() is None
    assert logon.get_last_logon_timestamp_datetime() is None
