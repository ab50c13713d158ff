class DataLoadError(Exception):
    """Raised when the food dataset is missing, unreadable or has no usable rows."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load food dataset {path}: {reason}")
        self.path = path
        self.reason = reason
