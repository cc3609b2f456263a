class InvalidUpsellTransition(RuntimeError):
    """Raised when the upsell offer is accepted or declined outside the shown state."""
    pass
