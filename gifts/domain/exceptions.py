class UserNotFound(Exception):
    pass


class EmailAlreadyRegistered(Exception):
    pass


class NotAMember(Exception):
    """The caller is not a member of the event that owns the resource."""
