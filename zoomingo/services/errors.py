"""Game errors. ClientError subclasses map to HTTP 400; everything else is a server error."""


class ClientError(Exception):
    """Rejected request; nothing was written."""


class InvalidPlayerName(ClientError):
    pass


class InvalidBoardSize(ClientError):
    pass


class GameNotFound(ClientError):
    pass


class ScenarioNotSelectable(ClientError):
    pass


class GameAlreadyWon(ClientError):
    pass


class NotSessionOwner(ClientError):
    pass


class CatalogError(Exception):
    """Scenario catalog cannot satisfy a lookup the game depends on."""
