__all__ = ['MatchNotFoundError', 'UndefinedStyleWarning', 'UnknownSectionWarning']


class _StringRepresentable(BaseException):
    def __str__(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return self.__class__.__name__


class MatchNotFoundError(LookupError, _StringRepresentable):
    """Line does not carry the prefix expected by its record builder"""


class UndefinedStyleWarning(UserWarning, _StringRepresentable):
    """Dialogue references a style missing from the document"""


class UnknownSectionWarning(SyntaxWarning, _StringRepresentable):
    """Section header not handled by the parser"""
