class SetupError(Exception):
    """Exception raised when the type registry is wired up incorrectly."""
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
