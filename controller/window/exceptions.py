###########EXTERNAL IMPORTS############

#######################################

#############LOCAL IMPORTS#############

#######################################

##########     W I N D O W     E X C E P T I O N S     ##########


class WindowError(Exception):
    """Base class for errors raised by a sliding window."""

    pass


class WindowConfigError(WindowError):
    """Raised when a window start, capacity or option has an invalid value."""

    pass


class WindowLockedError(WindowError):
    """
    Raised when a window is reconfigured after items were already fetched into it.
    """

    pass


##########     S O U R C E     E X C E P T I O N S     ##########


class SourceContractError(WindowError):
    """Raised when an item source returns a result that breaks the fetch contract."""

    pass
