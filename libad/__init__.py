# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Data access objects for Active Directory entries.

The library only shapes and validates attributes, the connection and the
LDAP operations belong to the caller.
"""

import logging

from libad._entry import Entry
from libad.idm.user import User
from libad.exceptions import (Error, ValidationError, MissingAttributeError,
                              InvalidContainerError)

__version__ = '1.0.0'

logger = logging.getLogger(__name__)
