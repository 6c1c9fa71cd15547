class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidMoveError(GameError):
    pass


class NoLegalMoveError(GameError):
    pass


class ConfigError(GameError):
    pass
