# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---


class Error(Exception):
    pass


class ValidationError(Error):
    """An attribute set was rejected before being sent to the server."""
    pass


class MissingAttributeError(ValidationError):
    """A required attribute is absent or empty."""

    def __init__(self, attribute):
        self.attribute = attribute
        super(MissingAttributeError, self).__init__(
            'missing required attribute: %s' % attribute)


class InvalidContainerError(ValidationError):
    """The container attribute is not a sequence of RDN strings."""

    def __init__(self, message='container must be an array'):
        super(InvalidContainerError, self).__init__(message)
