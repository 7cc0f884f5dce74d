# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---
#

import pytest

from libad.idm.user import User

JANE_DN = 'CN=Jane Doe,OU=Sales,DC=example,DC=com'


@pytest.fixture
def search_result():
    """A user entry as python-ldap returns it from a search."""
    return (JANE_DN, {
        'givenName': [b'Jane'],
        'sn': [b'Doe'],
        'title': [b'Sales Manager'],
        'department': [b'Sales'],
        'mail': [b'jdoe@example.com', b'jane.doe@example.com'],
        'proxyAddresses': [b'SMTP:jdoe@example.com', b'smtp:jane.doe@example.com'],
        'userAccountControl': [b'66050'],
        'memberOf': [b'CN=Sales Team,OU=Groups,DC=example,DC=com',
                     b'CN=VPN Users,OU=Groups,DC=example,DC=com'],
        'lastLogon': [b'132000000000000000'],
        'accountExpires': [b'9223372036854775807'],
    })


@pytest.fixture
def new_user_properties():
    """Attributes of a complete user about to be created."""
    return {
        'username': 'jdoe',
        'firstname': 'Jane',
        'surname': 'Doe',
        'email': 'jdoe@example.com',
        'container': ['OU=Sales', 'DC=example', 'DC=com'],
    }


@pytest.fixture
def new_user(new_user_properties):
    return User(attributes=new_user_properties)
