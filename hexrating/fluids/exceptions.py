class CoolPropError(Exception):
    """Raised when CoolProp cannot determine the state of a fluid."""
    pass
