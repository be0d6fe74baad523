from __future__ import annotations


class ArgumentError(Exception):
    """A fatal command-line error, raised before any traversal starts."""

    show_usage = False

    def message(self) -> str:
        return str(self)


class UsageError(ArgumentError):
    show_usage = True

    def __init__(self) -> None:
        super().__init__("")


class MissingArgumentError(ArgumentError):
    def __init__(self, option: str) -> None:
        super().__init__(option)
        self.option = option

    def message(self) -> str:
        return f"missing argument to `{self.option}'"


class DuplicateOptionError(ArgumentError):
    def __init__(self, option: str) -> None:
        super().__init__(option)
        self.option = option

    def message(self) -> str:
        return f"option already declared: `{self.option}'"


class UnknownPredicateError(ArgumentError):
    def __init__(self, option: str) -> None:
        super().__init__(option)
        self.option = option

    def message(self) -> str:
        return f"unknown predicate `{self.option}'"


class UnknownTypeError(ArgumentError):
    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def message(self) -> str:
        return f"unknown argument to -type: {self.code}"


class PathOrderError(ArgumentError):
    show_usage = True

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    def message(self) -> str:
        return f"paths must precede expression: {self.token}"
