class LibraryError(Exception):
    """
    A library command cannot go on; args are report items telling why
    """


class AttributeTypeError(LibraryError, TypeError):
    """
    An attribute has been given a value of a wrong shape
    """


class ValidationError(LibraryError, ValueError):
    """
    An attribute value breaks a rule of the order constraint
    """
